"""
UI components and visualization helpers.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from analytics import container_table, kind_frequency_table, simulation_table
from config import COLOR_MAP, PIECE_KINDS
from session import MENU_LABELS, CommandResult, Session


def print_rules() -> None:
    """Display how the queue and the reserve stack interact."""
    st.markdown("### How it works")
    st.write(f"Pieces: {', '.join(PIECE_KINDS)}, each with a unique, increasing id.")
    st.write("- The queue always shows the next 5 pieces. Playing one refills it at the back.")
    st.write("- Reserving moves the front piece onto the 3-slot stack.")
    st.write("- Swap exchanges the queue front with the stack top.")
    st.write("- Invert exchanges up to 3 pieces: the stack top becomes the queue front.")
    st.info("Undo restores the state from just before the last move. Only one level is kept.")


def render_containers(session: Session) -> None:
    """Plot queue and stack side by side: one row per container, pieces as markers."""
    df = container_table(session)
    if df.empty:
        st.info("No pieces in play.")
        return

    fig = px.scatter(
        df,
        x="Position",
        y="Container",
        color="Kind",
        text="Piece",
        color_discrete_map=COLOR_MAP,
        category_orders={"Container": ["Stack", "Queue"], "Kind": PIECE_KINDS},
        hover_name="Piece",
    )
    fig.update_traces(marker=dict(size=28, symbol="square", line=dict(width=1, color="black")),
                      textposition="top center")
    fig.update_layout(
        xaxis=dict(
            dtick=1,
            range=[0.5, max(session.queue.capacity, session.stack.capacity) + 0.5],
            title="Position (queue: front first, stack: bottom first)",
        ),
        yaxis=dict(title=None),
        height=300,
        margin=dict(l=10, r=10, t=30, b=10),
        legend_title_text="Kind",
    )
    st.plotly_chart(fig, use_container_width=True)


def render_container_table(session: Session) -> None:
    st.markdown("#### Pieces in play")
    st.dataframe(container_table(session), use_container_width=True, hide_index=True)


def render_last_result(result: CommandResult) -> None:
    label = MENU_LABELS.get(result.command, "Invalid")
    if result.ok:
        st.success(f"{label}: {result.message}")
    else:
        st.warning(f"{label}: {result.message}")


def render_kind_frequencies(pieces: list, title: str) -> None:
    """Bar chart of kind shares against the uniform 1/7 line."""
    st.markdown(f"#### {title}")
    df = kind_frequency_table(pieces)
    if df["Count"].sum() == 0:
        st.write("*Nothing played yet*")
        return
    fig = px.bar(df, x="Kind", y="Share", color="Kind", color_discrete_map=COLOR_MAP)
    fig.add_hline(y=df["Expected share"].iloc[0], line_dash="dash", line_color="gray")
    fig.update_layout(height=300, showlegend=False, margin=dict(l=10, r=10, t=30, b=10))
    st.plotly_chart(fig, use_container_width=True)


def render_simulation_summary(successes: dict, failures: dict, kind_counts: dict, avg_played: float) -> None:
    """Render Monte Carlo playout statistics."""
    st.markdown("#### Random playouts")
    st.dataframe(simulation_table(successes, failures), use_container_width=True, hide_index=True)

    total = sum(kind_counts.values())
    df_kinds = pd.DataFrame(
        [{"Kind": k, "Played": kind_counts[k], "Share": kind_counts[k] / total if total else 0.0}
         for k in PIECE_KINDS]
    )
    st.dataframe(df_kinds, use_container_width=True, hide_index=True)
    st.metric("Pieces played per game", f"{avg_played:.2f}")


def render_event_log(session: Session, limit: int = 10) -> None:
    st.markdown("#### Recent moves")
    events = list(session.events)[-limit:][::-1]
    if not events:
        st.write("*No moves yet*")
        return
    rows = [
        {
            "Command": MENU_LABELS.get(e.command, "Invalid"),
            "OK": e.ok,
            "Message": e.message,
        }
        for e in events
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
