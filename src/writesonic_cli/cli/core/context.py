"""Per-run context shared by the content commands.

The root callback stores the global flags as ``GlobalOptions`` on the Typer
context. The content command that runs then calls ``build_run_context`` once,
which loads the config, resolves the API key and the run defaults, and
decides the output mode. Everything downstream receives the ``RunContext``
explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import typer

from ...api.client import WritesonicClient
from ...config import ClientSettings, RunDefaults, load_config, require_api_key, resolve_defaults
from ...constants import Engine
from .output import OutputOptions, stdout_is_interactive


@dataclass(frozen=True)
class GlobalOptions:
    """Flags accepted by the root command."""

    json_flag: bool = False
    pretty_flag: bool = False
    engine: Optional[Engine] = None
    language: Optional[str] = None
    copies: Optional[int] = None
    verbose: bool = False


@dataclass(frozen=True)
class RunContext:
    """Everything a content command needs, resolved once."""

    client: WritesonicClient
    defaults: RunDefaults
    output: OutputOptions


def build_run_context(
    options: GlobalOptions,
    *,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    settings: ClientSettings | None = None,
    interactive: bool | None = None,
) -> RunContext:
    """Resolve credentials, defaults and output mode for this run.

    Args:
        options: Global flags from the root callback
        config_path: Config file override (defaults to the per-user path)
        environ: Environment override for API key lookup
        settings: Client settings override
        interactive: Terminal check override (defaults to checking stdout)

    Raises:
        ConfigError: If the config file is unreadable or a WRITESONIC_*
            setting is invalid.
        CredentialError: If no API key is available.
    """
    config = load_config(config_path)
    api_key = require_api_key(config, environ)

    defaults = resolve_defaults(
        config,
        engine=options.engine,
        language=options.language,
        copies=options.copies,
    )

    if interactive is None:
        interactive = stdout_is_interactive()

    return RunContext(
        client=WritesonicClient.from_settings(api_key, settings),
        defaults=defaults,
        output=OutputOptions(
            json_flag=options.json_flag,
            pretty_flag=options.pretty_flag,
            interactive=interactive,
        ),
    )


def get_global_options(ctx: typer.Context) -> GlobalOptions:
    """Fetch the root flags stored by the app callback."""
    root = ctx.find_root()
    if isinstance(root.obj, GlobalOptions):
        return root.obj
    return GlobalOptions()
