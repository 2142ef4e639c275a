from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from layerconf.container import ConfigContainer, ContainerBuilder
from layerconf.options import MISSING, ConversionError, OptionType
from layerconf.stores import EnvironmentStore, YamlFileStore


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


TypeOption = Annotated[
    OptionType,
    typer.Option("--type", "-t", case_sensitive=False, help="Declared type of the option."),
]
ItemTypeOption = Annotated[
    OptionType,
    typer.Option("--item-type", case_sensitive=False, help="Element type for list options."),
]
EnvPrefixOption = Annotated[
    str | None,
    typer.Option("--env-prefix", help="Consult environment variables with this prefix first."),
]
FileOption = Annotated[
    list[Path] | None,
    typer.Option("--file", "-f", help="YAML store, in priority order. Repeat for more stores."),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", show_default=True, case_sensitive=False, help="Output format (text or json)."),
]

app = typer.Typer(help="Resolve and update individual options.")


@app.callback(invoke_without_command=True)
def _option_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("get")
def get(
    key: Annotated[str, typer.Argument(help="Option name, dotted for nested keys.")],
    option_type: TypeOption = OptionType.STRING,
    item_type: ItemTypeOption = OptionType.STRING,
    default: Annotated[str | None, typer.Option("--default", help="Raw default used when no store has the key.")] = None,
    env_prefix: EnvPrefixOption = None,
    files: FileOption = None,
    format: FormatOption = OutputFormat.TEXT,
) -> None:
    _ensure_supported(option_type)
    container = _build_container(key, option_type, item_type, env_prefix, files or [], cache_timeout=0)
    descriptor = container.descriptor(key)

    try:
        resolved = container.resolve(key)
        value = resolved.value
        if not resolved.found and default is not None:
            value = container.engine.converter.parse(descriptor, default)
    except ConversionError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if format is OutputFormat.JSON:
        source = container.stores[resolved.source_index].name if resolved.source_index is not None else None
        payload = {"key": key, "value": value, "found": resolved.found, "source": source}
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    typer.echo(container.engine.converter.format(descriptor, value))


@app.command("set")
def set_(
    key: Annotated[str, typer.Argument(help="Option name, dotted for nested keys.")],
    value: Annotated[str, typer.Argument(help="Raw value, parsed with the declared type before writing.")],
    option_type: TypeOption = OptionType.STRING,
    item_type: ItemTypeOption = OptionType.STRING,
    env_prefix: EnvPrefixOption = None,
    files: FileOption = None,
) -> None:
    _ensure_supported(option_type)
    container = _build_container(key, option_type, item_type, env_prefix, files or [], cache_timeout=0)
    descriptor = container.descriptor(key)

    try:
        typed = container.engine.converter.parse(descriptor, value)
        result = container.set(key, typed)
    except ConversionError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if not result.applied:
        typer.secho(f"No store accepted '{key}'", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(f"{key} written to {result.store_name}")


def _ensure_supported(option_type: OptionType) -> None:
    if option_type in (OptionType.ENUM, OptionType.CUSTOM):
        typer.secho(f"Type '{option_type.value}' cannot be declared from the command line", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)


def _build_container(
    key: str,
    option_type: OptionType,
    item_type: OptionType,
    env_prefix: str | None,
    files: list[Path],
    *,
    cache_timeout: float,
) -> ConfigContainer:
    builder = ContainerBuilder(cache_timeout=cache_timeout)
    if env_prefix is not None:
        builder.add_store(EnvironmentStore(env_prefix))
    for path in files:
        builder.add_store(YamlFileStore(path))
    try:
        builder.declare(key, option_type, default=MISSING, item_type=item_type)
    except ValueError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2) from exc
    return builder.build()

