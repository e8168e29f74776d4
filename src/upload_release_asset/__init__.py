"""Upload files as GitHub release assets from a workflow step."""

import asyncio
import dataclasses
import logging
import sys

import click
from dotenv import load_dotenv

from .config import parse_bool

logger = logging.getLogger(__name__)


def _bool_input(ctx: click.Context, param: click.Parameter, value: str | None) -> bool:
    return parse_bool(value)


@click.command()
@click.option("--repo-token", envvar="INPUT_REPO_TOKEN", help="Token used to authenticate API calls")
@click.option(
    "--file",
    "file_",
    envvar="INPUT_FILE",
    help="Local file to upload, or a glob pattern with --file-glob true",
)
@click.option("--asset-name", envvar="INPUT_ASSET_NAME", help="Name of the asset in the release")
@click.option("--release-id", envvar="INPUT_RELEASE_ID", help="ID of the release to upload to")
@click.option(
    "--file-glob",
    envvar="INPUT_FILE_GLOB",
    metavar="BOOL",
    callback=_bool_input,
    help="Treat --file as a glob pattern",
)
@click.option(
    "--overwrite",
    envvar="INPUT_OVERWRITE",
    metavar="BOOL",
    callback=_bool_input,
    help="Replace an existing asset of the same name",
)
@click.option("--repo-name", envvar="INPUT_REPO_NAME", help="Target repository as owner/repo")
@click.option("--debug", is_flag=True, help="Emit ::debug:: messages")
def main(
    repo_token: str | None,
    file_: str | None,
    asset_name: str | None,
    release_id: str | None,
    file_glob: bool,
    overwrite: bool,
    repo_name: str | None,
    debug: bool,
) -> None:
    """Upload a release asset.

    Every option defaults to the INPUT_* variable the Actions runner exports
    for the step's ``with:`` inputs.
    """
    from .client import GitHubClient
    from .config import ActionConfig
    from .exceptions import ReleaseUploadError
    from .runner import OutputRegister, run_action
    from .workflow import configure_logging, set_failed, set_outputs

    try:
        env_config = ActionConfig.from_env()
    except ReleaseUploadError as exc:
        set_failed(str(exc))
        sys.exit(1)

    config = dataclasses.replace(
        env_config,
        repo_token=repo_token or "",
        file=file_ or "",
        asset_name=asset_name or "",
        release_id=release_id or "",
        file_glob=file_glob,
        overwrite=overwrite,
        repo_name=repo_name or "",
        debug=env_config.debug or debug,
    )
    configure_logging(debug=config.debug)

    register = OutputRegister()

    async def _run() -> bool:
        client = GitHubClient(config)
        try:
            result = await run_action(config, client, register)
        finally:
            await client.close()
        for failure in result.failures:
            set_failed(failure)
        return result.ok

    try:
        config.validate()
        ok = asyncio.run(_run())
    except Exception as exc:
        if not isinstance(exc, ReleaseUploadError):
            logger.debug("Upload aborted", exc_info=True)
        set_failed(str(exc) or type(exc).__name__)
        ok = False
    finally:
        set_outputs(register.outputs(), config.output_path)

    if not ok:
        sys.exit(1)


def run() -> None:
    """Console entry point; loads ``.env`` before options are read from the environment."""
    load_dotenv()
    main()


if __name__ == "__main__":
    run()
