"""COVID Explorer Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from web.api import covid  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="COVID Explorer", page_icon="🦠", layout="wide")

COLORS = {
    "Africa": "#F97316",
    "Asia": "#DC2626",
    "Europe": "#1E3A8A",
    "North America": "#22C55E",
    "Oceania": "#6366F1",
    "South America": "#84CC16",
}


def color(name: str) -> str:
    return COLORS.get(name, "#6B7280")


@st.cache_data(ttl=3600, show_spinner=False)
def get_overview_data():
    """Global totals and death rankings via views."""
    logger.info("Loading overview data")
    return {
        "totals": covid.get_global_totals().model_dump(),
        "continents": [d.model_dump() for d in covid.get_deaths_by_continent().items],
        "locations": [d.model_dump() for d in covid.get_deaths_by_location().items],
        "infection": [d.model_dump() for d in covid.get_infection_by_location().items],
    }


@st.cache_data(ttl=3600, show_spinner=False)
def get_locations():
    return covid.get_locations().locations


@st.cache_data(ttl=3600, show_spinner="Loading location...")
def get_location_data(location: str):
    """Infection and vaccination series for one location."""
    return {
        "infection": [d.model_dump() for d in covid.get_infection_rates(location).items],
        "vaccination": [d.model_dump() for d in covid.get_percent_population_vaccinated(location).items],
    }


def overview_tab(data: dict, top_n: int):
    """Global numbers and death rankings."""
    totals = data["totals"]
    cols = st.columns(3)
    cols[0].metric("Total cases", f"{totals['total_cases']:,}")
    cols[1].metric("Total deaths", f"{totals['total_deaths']:,}")
    pct = totals["death_percentage"]
    cols[2].metric("Death percentage", f"{pct:.2f}%" if pct is not None else "n/a")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("⚰️ Deaths by continent")
        continents = data["continents"]
        fig = go.Figure(
            go.Bar(
                x=[c["name"] for c in continents],
                y=[c["total_death_count"] for c in continents],
                marker_color=[color(c["name"]) for c in continents],
            )
        )
        fig.update_layout(height=350)
        st.plotly_chart(fig, width="stretch")

    with col2:
        st.subheader(f"📊 Top {top_n} countries by deaths")
        locations = data["locations"][:top_n]
        fig = go.Figure(
            go.Bar(
                x=[d["total_death_count"] for d in locations],
                y=[d["name"] for d in locations],
                orientation="h",
            )
        )
        fig.update_layout(height=350, yaxis=dict(autorange="reversed"), margin=dict(l=150))
        st.plotly_chart(fig, width="stretch")


def infection_tab(data: dict, top_n: int):
    """Countries with the highest infection rate."""
    st.subheader(f"🧑‍🤝‍🧑 Top {top_n} by percent of population infected")
    rows = [r for r in data["infection"] if r["percent_population_infected"] is not None][:top_n]
    if not rows:
        st.info("No infection data available.")
        return
    st.dataframe(rows, width="stretch", hide_index=True)


def vaccination_tab():
    """Vaccination progress for a chosen location."""
    locations = get_locations()
    if not locations:
        st.info("No locations loaded.")
        return

    default = locations.index("United States") if "United States" in locations else 0
    location = st.selectbox("Location", locations, index=default)
    data = get_location_data(location)
    vaccination = data["vaccination"]

    if not vaccination:
        st.warning(f"No vaccination data for {location}.")
        return

    latest = vaccination[-1]
    cols = st.columns(2)
    cols[0].metric("People vaccinated (rolling)", f"{latest['rolling_people_vaccinated']:,}")
    pct = latest["percent_population_vaccinated"]
    cols[1].metric("Percent of population", f"{pct:.1f}%" if pct is not None else "n/a")

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[r["date"] for r in vaccination],
            y=[r["percent_population_vaccinated"] for r in vaccination],
            name="% vaccinated",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[r["date"] for r in data["infection"]],
            y=[r["percent_population_infected"] for r in data["infection"]],
            name="% infected",
        )
    )
    fig.update_layout(height=400, yaxis_title="% of population")
    st.plotly_chart(fig, width="stretch")


def main():
    st.title("🦠 COVID Explorer")
    st.markdown("*Infection, death and vaccination statistics by location*")

    top_n = st.sidebar.slider("Top N", min_value=5, max_value=50, value=15)

    with st.spinner("Loading data..."):
        data = get_overview_data()

    tab1, tab2, tab3 = st.tabs(["🌍 Overview", "🧑‍🤝‍🧑 Infection", "💉 Vaccination"])

    with tab1:
        overview_tab(data, top_n)

    with tab2:
        infection_tab(data, top_n)

    with tab3:
        vaccination_tab()

    st.sidebar.markdown("---")
    st.sidebar.markdown("**Data Source:** [Our World in Data](https://ourworldindata.org/covid-deaths)")


if __name__ == "__main__":
    main()
