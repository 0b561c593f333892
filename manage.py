"""Management commands for the real-estate backend."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import click

from realestate.main import create_app
from realestate.db.session import SessionLocal, create_tables, drop_tables

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

# Create the Flask application once so commands can share configuration.
app = create_app({"AUTO_CREATE_TABLES": False})


@click.group()
def cli() -> None:
    """Entry point for management commands."""


@cli.command("init-db")
@click.option("--drop", is_flag=True, help="Drop all tables before creating them.")
def init_db(drop: bool) -> None:
    """Create every table for the configured DATABASE_URL."""
    with app.app_context():
        if drop:
            click.confirm("This deletes all data. Continue?", abort=True)
            drop_tables()
            logging.info("All tables dropped.")
        create_tables()
        logging.info("Database tables created.")


@cli.command("seed")
def seed() -> None:
    """Load the sample agents, clients, listings and appointments."""
    from realestate.db.seed import seed_sample_data

    with app.app_context():
        create_tables()
        created = seed_sample_data()
        if not any(created.values()):
            logging.info("Seed data already present; nothing to do.")
            return
        for kind, count in created.items():
            logging.info("Created %s %s", count, kind)


@cli.command("expired-licenses")
@click.option(
    "--on",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date (YYYY-MM-DD). Defaults to today.",
)
def expired_licenses(on) -> None:
    """List agents whose license is not valid on the given date."""
    from realestate.repositories import AgentRepository
    from realestate.services.agent_service import AgentService

    reference: Optional[date] = on.date() if on else None
    with app.app_context():
        session = SessionLocal()
        try:
            agents = AgentService(AgentRepository(session)).list_expired_licenses(
                reference
            )
            if not agents:
                logging.info("No agents with an expired license.")
                return
            for agent in agents:
                click.echo(
                    f"{agent.id}\t{agent.full_name}\t{agent.license_number}\t"
                    f"{agent.license_expiry_date.isoformat()}"
                )
        finally:
            session.close()


if __name__ == "__main__":
    cli()
