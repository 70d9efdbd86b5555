"""Root CLI command: open an LMDB environment and run the console on stdin."""

from __future__ import annotations

from pathlib import Path

import click
import lmdb

from lmdbctl import __version__
from lmdbctl.config.logging import configure_logging
from lmdbctl.config.settings import LmdbSettings

EXAMPLES = """\
  lmdbctl ./data
  lmdbctl --db ./data --ro
  lmdbctl --db ./data --size 4 --page-size 50
  echo 'get user:1 json' | lmdbctl ./data"""


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(EXAMPLES)
    ctx.exit(0)


@click.command()
@click.version_option(version=__version__, prog_name="lmdbctl")
@click.argument("path", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--db",
    "db_option",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Path to the LMDB environment directory.",
)
@click.option(
    "--size",
    "size_factor",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Factor applied to the data.mdb size to derive the map size.",
)
@click.option("--ro", "read_only", is_flag=True, help="Open the database in read-only mode.")
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=None,
    help="Entries printed per scan page.",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and detailed errors.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--examples",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples.",
)
def cli(
    path: Path | None,
    db_option: Path | None,
    size_factor: float | None,
    read_only: bool,
    page_size: int | None,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """lmdbctl — interactive console for an LMDB environment.

    Reads commands from stdin, one per line:

    \b
      get KEY [json]   exists KEY   put KEY VALUE   del KEY
      scan [PREFIX]    keys [PREFIX]   it (next page)
      stat   expand [FACTOR]   exit | quit
    """
    from lmdbctl.commands import build_handlers
    from lmdbctl.infrastructure.store import Store, estimate_map_size
    from lmdbctl.output.sink import OutputSink
    from lmdbctl.shell.context import SessionContext
    from lmdbctl.shell.repl import run_shell

    store_overrides = {"size_factor": size_factor} if size_factor is not None else None
    shell_overrides = {"page_size": page_size} if page_size is not None else None
    settings = LmdbSettings.from_cli(
        config_path=config_path,
        db_path=db_option or path,
        read_only=read_only or None,
        verbose=verbose or None,
        log_json=log_json or None,
        store=store_overrides,
        shell=shell_overrides,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    if settings.db_path is None:
        msg = "--db must be specified"
        raise click.UsageError(msg)

    db_path = settings.db_path
    try:
        map_size = estimate_map_size(
            db_path,
            settings.store.size_factor,
            default=settings.store.default_map_size,
        )
        store = Store.open(db_path, map_size=map_size, read_only=settings.read_only)
    except (OSError, lmdb.Error) as exc:
        msg = f"could not open {db_path}: {exc}"
        raise click.ClickException(msg) from exc

    stdin = click.get_binary_stream("stdin")
    context = SessionContext(
        store,
        OutputSink(click.get_binary_stream("stdout")),
        prompt=settings.shell.prompt,
        interactive=stdin.isatty(),
    )
    handlers = build_handlers(
        page_size=settings.shell.page_size,
        expand_factor=settings.store.size_factor,
    )
    try:
        run_shell(
            context,
            stdin,
            handlers,
            matching_quotes=settings.shell.strict_quotes,
            verbose=settings.verbose,
        )
    finally:
        context.close()
