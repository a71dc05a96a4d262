"""Command line entry point.

Usage:
    feature-generator -l en -a specs/petstore.yaml -o features -t "$OPENAI_API_KEY"
    feature-generator --language es --api-docs https://example.com/openapi.json --output features

Every option can also be given through its environment variable (see --help).
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import ENV_DEFAULTS, GeneratorSettings, env_default, missing_options
from .generator import FeatureGenerator
from .generator.engine import DEFAULT_MODEL
from .generator.errors import FeatureGeneratorError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feature-generator",
        description="Generates feature files based on API documentation using OpenAI.",
    )
    parser.add_argument("-l", "--language", default=env_default("language"),
                        help=f"ISO 639-1 language code (env {ENV_DEFAULTS['language']})")
    parser.add_argument("-a", "--api-docs", default=env_default("api_docs"),
                        help=f"Api docs url, file or content (env {ENV_DEFAULTS['api_docs']})")
    parser.add_argument("-o", "--output", default=env_default("output"),
                        help=f"Feature Generator output directory (env {ENV_DEFAULTS['output']})")
    parser.add_argument("-t", "--token", default=env_default("token"),
                        help=f"OpenAI token (env {ENV_DEFAULTS['token']})")
    parser.add_argument("--model", default=env_default("model") or DEFAULT_MODEL,
                        help=f"Chat completion model (env {ENV_DEFAULTS['model']}, default {DEFAULT_MODEL})")
    parser.add_argument("--base-url", default=env_default("base_url"),
                        help=f"OpenAI API base url (env {ENV_DEFAULTS['base_url']})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_settings(parser: argparse.ArgumentParser, argv: list[str] | None = None) -> tuple[GeneratorSettings, bool]:
    args = parser.parse_args(argv)
    values = vars(args)
    missing = missing_options(values)
    if missing:
        parser.error("Missing required arg: " + ", ".join("--" + option.replace("_", "-") for option in missing))
    settings = GeneratorSettings(
        language=args.language,
        api_docs=args.api_docs,
        output=args.output,
        token=args.token,
        model=args.model,
        base_url=args.base_url,
    )
    return settings, args.verbose


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    settings, verbose = load_settings(parser, argv)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Configuration: %s", settings.masked())

    try:
        generator = FeatureGenerator(
            settings.token,
            settings.api_docs,
            model=settings.model,
            base_url=settings.base_url,
        )
        generator.generate(settings.output, settings.language)
    except FeatureGeneratorError as exc:
        logger.error("Feature generation failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
