import argparse
import asyncio
from datetime import date
from pathlib import Path

def run_estimate(args, overrides):
    from martcrowd.common.config import ConfigManager
    from martcrowd.forecast.application.builder import ForecastApplicationBuilder
    from martcrowd.forecast.domain import Query

    cfg = ConfigManager(args.config_dir).load(overrides=overrides)
    builder = ForecastApplicationBuilder(cfg)
    orchestrator = builder.build_orchestrator()

    day = date.fromisoformat(args.date) if args.date else builder.today()
    query = Query(region=args.region, store=args.store, date=day)

    bundle = asyncio.run(orchestrator.handle_submission(query))
    view = builder.renderer.render(bundle, builder.stores.display_name(query.store))

    print(view.title)
    print(view.weather_text)
    if view.empty_message:
        print(view.empty_message)
    for row in view.rows:
        print(f"  {row.time_range:<15} {row.label}")

def run_server(args, overrides):
    import uvicorn
    from martcrowd.common.config import ConfigManager
    from martcrowd.forecast.presentation.api import create_app

    cfg = ConfigManager(args.config_dir).load(overrides=overrides)
    app = create_app(cfg)
    print(f"Starting server at http://{cfg.server.host}:{cfg.server.port}")
    uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)

def build_parser() -> argparse.ArgumentParser:
    from martcrowd.common.config import DEFAULT_CONFIG_DIR

    parser = argparse.ArgumentParser(description="Mart crowd forecast")
    parser.add_argument(
        "--config-dir", type=Path, default=DEFAULT_CONFIG_DIR,
        help="Directory holding config.yaml (default: the bundled config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Start the forecast API")

    estimate = subparsers.add_parser("estimate", help="Run one forecast and print it")
    estimate.add_argument("--region", required=True)
    estimate.add_argument("--store", required=True)
    estimate.add_argument("--date", help="YYYY-MM-DD (default: today)")
    return parser

def main(argv=None):
    """
    Entry point. Extra key=value arguments are applied as config overrides.
    """
    args, unknown = build_parser().parse_known_args(argv)

    if args.command == "serve":
        run_server(args, unknown)
    elif args.command == "estimate":
        run_estimate(args, unknown)

if __name__ == "__main__":
    main()
