import argparse
import datetime
import sys
import json
import logging
from pathlib import Path
import jmespath
import pydantic
import yarl

from .openapi import OpenAPI
from .loader import ChainLoader, FileSystemLoader, Loader, WebLoader
from .errors import ErrorBase
from .log import init

logg = logging.getLogger("openapi3doc.cli")

init()


def loader_prepare(args) -> Loader:
    path = yarl.URL(args.input)
    if path.scheme in ["http", "https"]:
        return WebLoader(baseurl=path.with_path("/").with_query({}))
    locations = args.locations or [Path(args.input).parent]
    return ChainLoader(*[FileSystemLoader(Path(l).expanduser()) for l in locations])


def document_location(args) -> yarl.URL:
    path = yarl.URL(args.input)
    if path.scheme in ["http", "https"] or args.locations:
        return path
    return yarl.URL(Path(args.input).name)


def schema_display_stats(api: OpenAPI, duration):
    operations = list(api.document.operations())
    print(f"…  {duration} (processing time)")
    print(f"… {len(api.paths)} #paths")
    print(f"… {len(operations)} #operations")
    components = api.components
    print(f"… {len((components.schemas if components else None) or {})} #schemas")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser("openapi3doc", description="OpenAPI 3.0 description document validator")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="be verbose")
    parser.add_argument("-L", "--locations", action="append", help="directories to look up the input in")
    sub = parser.add_subparsers()

    cmd = sub.add_parser("validate")
    cmd.add_argument("input")

    def cmd_validate(args: argparse.Namespace) -> int:
        loader = loader_prepare(args)
        begin = datetime.datetime.now()
        try:
            api = OpenAPI.load_file(args.input, document_location(args), loader=loader)
        except pydantic.ValidationError as e:
            print(e)
            return 1
        except ErrorBase as e:
            print(e)
            return 1
        duration = datetime.datetime.now() - begin
        if args.verbose:
            schema_display_stats(api, duration)
        print("OK")
        return 0

    cmd.set_defaults(func=cmd_validate)

    cmd = sub.add_parser("convert")
    cmd.add_argument("input")
    cmd.add_argument("output")
    cmd.add_argument("-f", "--format", choices=["yaml", "json"], default=None)

    def cmd_convert(args: argparse.Namespace) -> int:
        output = Path(args.output)
        format = args.format or output.suffix[1:]
        if format not in ["yaml", "json"]:
            parser.error(f"unable to derive the output format from {output.name}, use --format")

        loader = loader_prepare(args)
        api = OpenAPI.load_file(args.input, document_location(args), loader=loader)
        with output.open("wt") as f:
            f.write(api.dumps(format))
        logg.debug("wrote %s (%s)", output, format)
        return 0

    cmd.set_defaults(func=cmd_convert)

    cmd = sub.add_parser("query")
    cmd.add_argument("input")
    cmd.add_argument("expression", help="jmespath expression applied to the normalized document")

    def cmd_query(args: argparse.Namespace) -> int:
        expr = jmespath.compile(args.expression)
        loader = loader_prepare(args)
        api = OpenAPI.load_file(args.input, document_location(args), loader=loader)
        obj = expr.search(api.document.to_dict())
        print(json.dumps(obj, indent=2, sort_keys=True))
        return 0

    cmd.set_defaults(func=cmd_query)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if getattr(args, "func", None) is None:
        parser.print_help()
        return 2
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
