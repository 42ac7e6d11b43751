"""
querysense

Command-line entry point: analyze the statements of a SQL script, or ask the
SQL assistant a question.
"""
import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from contextlib import AsyncExitStack
from pathlib import Path

from querysense.chat import match
from querysense.config import AppConfig, ConfigLoader
from querysense.core import ReportPipeline, SqlAnalyzer
from querysense.exceptions import ConfigError, ReportDeliveryError
from querysense.input import SqlFileInput
from querysense.logger import setup_logger
from querysense.output import (
    ConsoleReportOutput,
    HttpReportOutput,
    JsonReportOutput,
    ReportOutput,
    SqsReportOutput,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="querysense", description="Rule-based SQL performance critique")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Analyze every statement of a SQL script")
    analyze.add_argument("file", nargs="?", default="-", help="SQL script path, or - for stdin")
    analyze.add_argument("--database-type", help="Label stored on each report")
    analyze.add_argument("--json", action="store_true", help="Print reports as JSON")
    analyze.add_argument("--config", type=Path, help="YAML configuration file")
    analyze.add_argument("--sqs-queue-url", help="Also send reports to this SQS queue")
    analyze.add_argument("--history-endpoint", help="Also POST reports to this URL")
    analyze.add_argument("--log-level", help="Console log level")

    chat = subparsers.add_parser("chat", help="Ask the SQL assistant a question")
    chat.add_argument("message", nargs="+")

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig()
    if args.config is not None:
        config = ConfigLoader.load_config(args.config, base=config)
    config = ConfigLoader.from_env(base=config)

    overrides = {
        "database_type": args.database_type,
        "sqs_queue_url": args.sqs_queue_url,
        "history_endpoint": args.history_endpoint,
        "log_level": args.log_level,
    }
    return ConfigLoader.apply(config, {k: v for k, v in overrides.items() if v is not None})


async def run_analyze(args: argparse.Namespace, config: AppConfig) -> int:
    if args.file == "-":
        input_source = SqlFileInput.from_text(sys.stdin.read(), database_type=config.database_type)
    else:
        input_source = SqlFileInput(args.file, database_type=config.database_type)

    async with AsyncExitStack() as stack:
        outputs: list[ReportOutput] = [
            JsonReportOutput() if args.json else ConsoleReportOutput(prefix=config.console_prefix)
        ]
        if config.sqs_queue_url:
            outputs.append(SqsReportOutput(config.sqs_queue_url, region=config.sqs_region))
        if config.history_endpoint:
            outputs.append(
                await stack.enter_async_context(
                    HttpReportOutput(config.history_endpoint, api_key=config.history_api_key)
                )
            )

        pipeline = ReportPipeline(input_source, SqlAnalyzer(), outputs)
        await pipeline.run()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "chat":
        print(match([], " ".join(args.message)))
        return 0

    try:
        config = load_config(args)
    except (ConfigError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    setup_logger(config.log_level, config.log_file)

    try:
        return asyncio.run(run_analyze(args, config))
    except FileNotFoundError as exc:
        logger.error("Error: %s", exc)
        return 2
    except ReportDeliveryError as exc:
        logger.error("Report delivery failed: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
