# dags/forecast_digest_dag.py
from __future__ import annotations
import os
from datetime import datetime, timedelta
from typing import List
from airflow.decorators import dag, task
from airflow.exceptions import AirflowFailException
from weathercards.client import OpenWeatherClient
from weathercards.display import card_lines
from weathercards.errors import WeatherAPIError, user_message
from weathercards.service import forecast_for_city

CITIES = ["Lisbon,PT", "Porto,PT", "Faro,PT"]


@dag(
    dag_id="forecast_digest",
    start_date=datetime(2025, 1, 1),
    schedule="0 6 * * *",
    catchup=False,
    default_args={"owner": "weathercards", "retries": 0},
    tags=["weather", "forecast-digest"],
)
def forecast_digest():
    @task(pool="openweather", execution_timeout=timedelta(seconds=30))
    def fetch_cards(city: str) -> dict:
        api_key = os.getenv("OPENWEATHER_API_KEY")
        if not api_key:
            raise AirflowFailException("OPENWEATHER_API_KEY not set in task environment")

        client = OpenWeatherClient(api_key=api_key)
        locale = os.getenv("WEATHERCARDS_LOCALE", "pt-PT")
        try:
            forecast = forecast_for_city(client, city, locale=locale, use_city_timezone=True)
        except WeatherAPIError as e:
            raise AirflowFailException(f"fetch_cards({city}): {user_message(e)} ({e})")

        return {"city": city, "lines": card_lines(forecast), "n_days": len(forecast)}

    results = fetch_cards.expand(city=CITIES)

    @task
    def publish(rows: List[dict]) -> None:
        by = {r["city"]: r for r in rows}
        for city in CITIES:
            r = by[city]
            print(f"5-Day Forecast for {city} (n={r['n_days']})")
            for line in r["lines"]:
                print(f"  {line}")

    publish(results)


dag = forecast_digest()
