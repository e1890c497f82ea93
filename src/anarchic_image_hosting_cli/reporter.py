from logging import Logger

import click

from anarchic_image_hosting_cli.utils import UploadOutcome


def report(outcome: UploadOutcome, logger: Logger) -> bool:
    """Print the server's answer; returns True when the upload was accepted."""
    # Server text is echoed raw (color=True keeps any escape codes it carries).
    if outcome.ok:
        click.echo(outcome.text, color=True)
        logger.info(f"File uploaded successfully: {outcome.text}")
        return True

    click.echo(f"Failed to upload the file. Status: {outcome.status_code}", err=True)
    click.echo(f"Response: {outcome.text}", err=True, color=True)
    logger.error(f"Failed to upload file. Status: {outcome.status_code}. Response: {outcome.text}")
    return False
