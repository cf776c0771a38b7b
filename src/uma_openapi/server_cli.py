"""CLI entry point: run the API server or export the generated document."""

import argparse
import json
import sys

from uma_openapi.config import settings


def _generator(strict: bool = False):
    from uma_openapi.logging_config import configure_logging
    from uma_openapi.openapi.config import OpenAPIConfig
    from uma_openapi.openapi.generator import OpenAPIGenerator

    configure_logging(log_level=settings.log_level, json_output=settings.json_logs)
    config = OpenAPIConfig.from_settings(settings)
    if strict:
        config.strict_categories = True
    return OpenAPIGenerator(config)


def _serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("uma_openapi.main:app", host=args.host, port=args.port)


def _export(args: argparse.Namespace) -> None:
    from uma_openapi.errors.exceptions import ValidationError

    generator = _generator(strict=args.strict)
    if args.strict:
        try:
            generator.ensure_valid()
        except ValidationError as exc:
            print(f"error: {exc.message}", file=sys.stderr)
            for detail in exc.details:
                print(f"  {detail}", file=sys.stderr)
            raise SystemExit(1) from exc

    text = json.dumps(generator.generate(), indent=args.indent)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text + "\n")


def _categories(args: argparse.Namespace) -> None:
    registry = _generator().schema_registry
    grouped = registry.get_schemas_by_category()
    width = max(len(str(category)) for category in grouped)
    for category, names in grouped.items():
        print(f"{str(category):<{width}}  {len(names):>3}")
    print(f"{'Total':<{width}}  {len(registry):>3}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="uma-openapi",
        description="UMA OpenAPI schema registry and document server",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    serve.add_argument(
        "--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})",
    )
    serve.set_defaults(func=_serve)

    export = subparsers.add_parser("export", help="Write the OpenAPI document as JSON")
    export.add_argument("-o", "--output", help="Output file (default: stdout)")
    export.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    export.add_argument(
        "--strict",
        action="store_true",
        help="Fail when validation reports errors, including uncategorized schemas",
    )
    export.set_defaults(func=_export)

    categories = subparsers.add_parser("categories", help="Show schema counts per category")
    categories.set_defaults(func=_categories)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
