"""
Main Streamlit application.
"""

import streamlit as st

from config import SIMULATION_GAMES, SIMULATION_STEPS
from logger_config import setup_logging
from session import MENU_LABELS, Command, Session, format_queue, format_stack
from simulation import simulate_sessions
from ui import (
    print_rules,
    render_container_table,
    render_containers,
    render_event_log,
    render_kind_frequencies,
    render_last_result,
    render_simulation_summary,
)

BUTTON_COMMANDS = [
    Command.PLAY,
    Command.RESERVE,
    Command.USE_RESERVED,
    Command.SWAP,
    Command.INVERT,
    Command.UNDO,
]


def reset_session() -> None:
    st.session_state["session"] = Session()
    st.session_state["last_result"] = None


def run_app() -> None:
    """Run the main Streamlit application."""
    st.set_page_config(page_title="Piece Queue & Reserve", layout="wide")
    st.title("Piece Queue & Reserve")

    if "session" not in st.session_state:
        setup_logging()
        reset_session()

    with st.expander("Rules", expanded=False):
        print_rules()

    # Controls
    cols = st.columns(len(BUTTON_COMMANDS) + 1)
    for col, command in zip(cols, BUTTON_COMMANDS):
        session: Session = st.session_state["session"]
        nothing_to_undo = command is Command.UNDO and not session.snapshots.has_snapshot
        with col:
            if st.button(MENU_LABELS[command], key=f"cmd_{command.name}", disabled=nothing_to_undo):
                st.session_state["last_result"] = session.execute(command)

    with cols[-1]:
        if st.button("🔁 Reset game"):
            reset_session()

    session: Session = st.session_state["session"]

    if st.session_state["last_result"] is not None:
        render_last_result(st.session_state["last_result"])

    st.markdown(f"**Queue:** {format_queue(session.queue)}")
    st.markdown(f"**Stack:** {format_stack(session.stack)}")

    # Layout: containers + dashboards
    board_col, metrics_col = st.columns([1.2, 1.8])

    with board_col:
        st.subheader("Board")
        render_containers(session)
        render_container_table(session)
        render_event_log(session)

    with metrics_col:
        st.subheader("Dashboards")
        render_kind_frequencies(session.played, "Kinds played this session")

        if st.button("🎲 Run random playouts"):
            successes, failures, kind_counts, avg_played = simulate_sessions(
                n_games=SIMULATION_GAMES, n_steps=SIMULATION_STEPS
            )
            render_simulation_summary(successes, failures, kind_counts, avg_played)
            st.caption(
                f"{SIMULATION_GAMES} sessions of {SIMULATION_STEPS} random moves each."
            )


if __name__ == "__main__":
    run_app()
