"""Command-line entry point: digest a tree serially, then in parallel."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import typer

from treedigest.config import ConfigError, DigestMode, load_config
from treedigest.digest import digest_all_parallel, digest_all_serial
from treedigest.errors import DigestError
from treedigest.models import DigestMap
from treedigest.report import format_digest_lines, hex_digests
from treedigest.util.hashing import get_hasher
from treedigest.util.logging import configure_logging
from treedigest.util.manifest import write_manifest

app = typer.Typer(add_completion=False, help="Print a content digest for every regular file under ROOT")

DIGESTERS: dict[DigestMode, Callable[..., DigestMap]] = {
    "serial": digest_all_serial,
    "parallel": digest_all_parallel,
}

PHASE_BANNERS: dict[DigestMode, str] = {
    "serial": "Serial digester...",
    "parallel": "Parallel digester...",
}


@app.command()
def digest(
    root: Path = typer.Argument(..., help="Directory tree to digest"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML/TOML/JSON config file"),
    algorithm: Optional[str] = typer.Option(None, help="Digest algorithm: md5, sha1 or sha256"),
    mode: Optional[List[str]] = typer.Option(None, "--mode", help="serial or parallel (repeatable)"),
    log_file: Optional[Path] = typer.Option(None, help="Also write log records to this file"),
    manifest_dir: Optional[Path] = typer.Option(None, help="Write a JSON run manifest per phase here"),
) -> None:
    """Digest ROOT with each configured digester and print sorted results."""

    overrides: dict[str, object] = {}
    if algorithm:
        overrides["digest.algorithm"] = algorithm
    if mode:
        overrides["digest.modes"] = list(mode)
    if log_file:
        overrides["runtime.log_path"] = str(log_file)
    if manifest_dir:
        overrides["runtime.manifest_dir"] = str(manifest_dir)

    try:
        cfg = load_config(config, overrides=overrides)
    except ConfigError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=2)

    logger = configure_logging(level=cfg.runtime.log_level, log_path=cfg.runtime.log_path)
    hasher = get_hasher(cfg.digest.algorithm)

    typer.echo("Digester...")
    for phase in cfg.digest.modes:
        typer.echo(PHASE_BANNERS[phase])
        logger.info("Running %s digester over %s with %s", phase, root, cfg.digest.algorithm)
        try:
            digests = DIGESTERS[phase](root, hasher=hasher)
        except DigestError as exc:
            logger.info("%s digester failed: %s", phase, exc)
            typer.echo(str(exc))
            raise typer.Exit(code=1)

        for line in format_digest_lines(digests):
            typer.echo(line)

        if cfg.runtime.manifest_dir:
            dest = write_manifest(
                {
                    "root": str(root),
                    "mode": phase,
                    "algorithm": cfg.digest.algorithm,
                    "files": len(digests),
                    "digests": hex_digests(digests),
                },
                root=cfg.runtime.manifest_dir,
            )
            logger.info("Wrote manifest %s", dest)


def main() -> None:
    app()


__all__ = ["main", "app"]
