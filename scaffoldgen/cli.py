"""CLI entrypoints for scaffoldgen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from .config import ConfigError, load_config
from .export import build_archive, write_project
from .generator import Generator
from .logging import configure_logging, get_logger
from .models import ProjectResult
from .parsing import parse_completion
from .parsing.tree import render_tree
from .prompting import DEFAULT_PROJECT_NAME, GenerationRequest, PromptEnhancer
from .prompting.constants import APP_TYPES
from .providers import MODEL_CHOICES, ProviderError, describe_error

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the reconstructed files into this directory.",
    )
    parser.add_argument(
        "--archive",
        type=Path,
        help=(
            "Write the reconstructed files into this zip archive. An existing "
            "directory receives <project-name>.zip."
        ),
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing files when writing to --output.",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the folder tree instead of the JSON document.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffoldgen",
        description="Reconstruct project files from model completions.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .scaffoldgen.yml or its directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a saved completion into a project.",
    )
    _add_verbose_option(parse_parser, suppress_default=True)
    parse_parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="File containing the completion text (defaults to stdin).",
    )
    _add_output_options(parse_parser)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Ask a provider for a project and reconstruct it.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument("prompt", help="What the application should do.")
    generate_parser.add_argument(
        "--model",
        choices=sorted(MODEL_CHOICES),
        default="gpt4",
        help="Model used for generation.",
    )
    generate_parser.add_argument(
        "--app-type",
        choices=APP_TYPES,
        default="web",
        help="Kind of application to generate.",
    )
    generate_parser.add_argument(
        "--include-backend",
        action="store_true",
        help="Ask for Firebase backend integration.",
    )
    _add_output_options(generate_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for scaffoldgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "parse":
        try:
            text = _read_source(args.source)
        except OSError as exc:
            parser.exit(1, f"Unable to read {args.source}: {exc}\n")
        _emit(parser, parse_completion(text), args, DEFAULT_PROJECT_NAME)
    elif args.command == "generate":
        try:
            config = load_config(args.config)
            generator = Generator(config)
            job = generator.generate(
                GenerationRequest(
                    prompt=args.prompt,
                    model=args.model,
                    app_type=args.app_type,
                    include_backend=bool(args.include_backend),
                )
            )
        except ProviderError as exc:
            parser.exit(1, f"{describe_error(exc)}\n")
        except (ConfigError, ValueError) as exc:
            parser.exit(1, f"scaffoldgen generate failed: {exc}\n")
        assert job.result is not None
        project = PromptEnhancer().extract_project_config(args.prompt)
        logger.info(
            "Project %s with features: %s", project.name, ", ".join(project.features) or "none"
        )
        _emit(parser, job.result, args, project.name)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port, verbose=bool(args.verbose))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _read_source(source: str, stdin: TextIO | None = None) -> str:
    if source == "-":
        return (stdin or sys.stdin).read()
    return Path(source).read_text(encoding="utf-8")


def _emit(
    parser: argparse.ArgumentParser,
    result: ProjectResult,
    args: argparse.Namespace,
    project_name: str,
) -> None:
    if args.output is not None:
        try:
            written = write_project(result, args.output, overwrite=bool(args.overwrite))
        except (FileExistsError, ValueError) as exc:
            parser.exit(1, f"{exc}\n")
        print(f"Wrote {len(written)} files to {_relativize(args.output)}")
    if args.archive is not None:
        archive = build_archive(result, _archive_target(args.archive, project_name))
        print(f"Archive written to {_relativize(archive)}")
    if args.output is None and args.archive is None:
        if args.tree:
            print(render_tree(result.tree))
        else:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    print(result.notes, file=sys.stderr)


def _archive_target(path: Path, project_name: str) -> Path:
    if path.is_dir():
        return path / f"{project_name}.zip"
    return path


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
