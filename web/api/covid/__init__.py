"""COVID API."""

from web.api.covid.views import (
    get_death_rates,
    get_deaths_by_continent,
    get_deaths_by_location,
    get_global_totals,
    get_infection_by_location,
    get_infection_rates,
    get_locations,
    get_percent_population_vaccinated,
)

__all__ = [
    "get_locations",
    "get_death_rates",
    "get_infection_rates",
    "get_infection_by_location",
    "get_deaths_by_location",
    "get_deaths_by_continent",
    "get_global_totals",
    "get_percent_population_vaccinated",
]
