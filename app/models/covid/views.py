"""Reusable views for dashboards and BI tools."""

PERCENT_POPULATION_VACCINATED = "PercentPopulationVaccinated"

# Nulls in new_vaccinations count as 0 in the running sum.
PERCENT_POPULATION_VACCINATED_DDL = f"""
CREATE OR REPLACE VIEW {PERCENT_POPULATION_VACCINATED} AS
WITH rolling AS (
    SELECT
        d.continent,
        d.location,
        d.date,
        d.population,
        v.new_vaccinations,
        SUM(COALESCE(v.new_vaccinations, 0)) OVER (
            PARTITION BY d.location
            ORDER BY d.date
            ROWS BETWEEN UNBOUNDED PRECEDING AND CURRENT ROW
        ) AS rolling_people_vaccinated
    FROM deaths d
    JOIN vaccinations v
        ON d.location = v.location
       AND d.date = v.date
    WHERE d.continent IS NOT NULL
)
SELECT
    continent,
    location,
    date,
    population,
    new_vaccinations,
    CAST(rolling_people_vaccinated AS BIGINT) AS rolling_people_vaccinated,
    CASE
        WHEN population IS NULL OR population = 0 THEN NULL
        ELSE rolling_people_vaccinated / population * 100
    END AS percent_population_vaccinated
FROM rolling
"""
