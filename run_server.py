"""Run the WalletAPI development server."""

from __future__ import annotations

import os

from walletapi import create_app


def main() -> None:
    app = create_app(os.getenv("WALLETAPI_ENV", "development"))
    config = app.config["WALLETAPI_CONFIG"]
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
