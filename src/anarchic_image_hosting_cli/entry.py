#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import asyncio
import signal
import click
from logging import Logger
from pathlib import Path
from typing import Optional

from anarchic_image_hosting_cli import __version__
from anarchic_image_hosting_cli.client import UploadClient
from anarchic_image_hosting_cli.config import load_config, resolve_endpoint
from anarchic_image_hosting_cli.display import error_panel, warn
from anarchic_image_hosting_cli.errors import UploadError
from anarchic_image_hosting_cli.files import read_payload
from anarchic_image_hosting_cli.log import init_logger
from anarchic_image_hosting_cli.reporter import report
from anarchic_image_hosting_cli.utils import CONFIG_FILE_NAME


# ========== Upload pipeline ==========
async def run_upload(file_path: Path, url: str, logger: Logger, timeout: Optional[float] = None) -> bool:
    payload = read_payload(file_path)
    logger.debug(f"Read {len(payload.content)} bytes from file: {file_path}")
    logger.debug(f"Using file name: {payload.name}")

    client = UploadClient(logger=logger, timeout=timeout)
    outcome = await client.upload(url, payload)
    return report(outcome, logger)


# ========== CLI with Click ==========

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("file_path", type=click.Path(path_type=Path))
@click.option("--url", "-u", help="URL of the service the file is uploaded to (overrides the config file endpoint).")
@click.option("--timeout", type=float, default=None,
              help="Give up waiting for the server after this many seconds. Waits indefinitely by default.")
@click.version_option(__version__, prog_name="anarchic-image-hosting-cli")
def cli(file_path: Path, url: Optional[str], timeout: Optional[float]):
    """
    Upload FILE_PATH to an anarchic image hosting service.

    The endpoint is taken from --url, then from the "endpoint" key of
    anarchic-image-hosting-cli.json5 in the working directory, then
    http://localhost:8080. "/upload" is appended to it.
    """
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    loaded = load_config(CONFIG_FILE_NAME)
    if not loaded.available:
        warn(f"Could not load config file: {loaded.reason}")

    logger = init_logger(loaded.effective_log_level)
    logger.debug(f"Parsed arguments: file_path={file_path!s} url={url!r} timeout={timeout!r}")

    target = resolve_endpoint(url, loaded.config.endpoint)
    logger.debug(f"Using endpoint URL: {target}")

    try:
        accepted = asyncio.run(run_upload(file_path, target, logger, timeout=timeout))
    except UploadError as e:
        logger.error(e.message)
        error_panel(type(e).__name__, e.message)
        raise SystemExit(1)

    if not accepted:
        raise SystemExit(1)


def main():
    cli(prog_name="anarchic-image-hosting-cli")


if __name__ == "__main__":
    main()
