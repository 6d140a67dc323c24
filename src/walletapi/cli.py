"""Flask CLI commands for WalletAPI."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("walletapi-init-db")
    def walletapi_init_db() -> None:
        """Create any missing tables."""

        from .extensions import get_context
        from .infra.database import init_database

        init_database(get_context(app).engine)
        click.echo("Database schema is up to date.")

    @app.cli.command("walletapi-seed")
    def walletapi_seed() -> None:
        """Insert demo users and transactions (idempotent)."""

        from .extensions import get_context
        from .services.seed import seed_demo_data

        ctx = get_context(app)
        click.echo("Seeding demo data...")
        report = seed_demo_data(ctx.user_repo, ctx.transaction_repo)
        click.echo(
            f"Seed complete: {report.users_created} user(s), "
            f"{report.transactions_created} transaction(s) created."
        )
