import click
from dotenv import load_dotenv

from lsif_upload.config import Config
from lsif_upload.context import DEFAULT_DUMP_FILE, resolve_context
from lsif_upload.log import configure_logging
from lsif_upload.upload import upload

EXAMPLES = """\
\b
Examples:

\b
  Upload an LSIF dump with explicit repo, commit, and upload files:
    $ lsif-upload --repo=FOO --commit=BAR --file=dump.lsif

\b
  Upload an LSIF dump for a subproject:
    $ lsif-upload --root=cmd/

\b
  Upload an LSIF dump when lsifEnforceAuth is enabled:
    $ lsif-upload --github-token=BAZ

\b
  Upload an LSIF dump when the LSIF indexer does not declare a tool name:
    $ lsif-upload --indexer-name=lsif-elixir
"""


@click.command(epilog=EXAMPLES)
@click.option("--repo", default="",
              help="The name of the repository (e.g. github.com/gorilla/mux). "
                   "By default, derived from the origin remote.")
@click.option("--commit", default="",
              help="The 40-character hash of the commit. Defaults to the currently checked-out commit.")
@click.option("--file", "file", default=DEFAULT_DUMP_FILE, show_default=True,
              help="The path to the LSIF dump file.")
@click.option("--github-token", default="",
              help="A GitHub access token with 'public_repo' scope that the server uses "
                   "to verify you have access to the repository.")
@click.option("--root", default=None,
              help="The path in the repository that matches the LSIF projectRoot (e.g. cmd/project1). "
                   "Defaults to the directory where the dump file is located.")
@click.option("--indexer-name", "--indexerName", "indexer_name", default="",
              help="The name of the indexer that generated the dump. Overrides the 'toolInfo.name' "
                   "field in the metadata vertex of the dump; required if the indexer does not set it.")
@click.option("--open", "open_browser", is_flag=True, default=False,
              help="Open the LSIF upload page in your browser.")
@click.option("--get-curl", is_flag=True, default=False,
              help="Print the equivalent curl command instead of uploading.")
@click.option("--endpoint", default=None,
              help="Server endpoint. Defaults to $SRC_ENDPOINT or https://sourcegraph.com.")
@click.option("--access-token", default=None,
              help="Server access token. Defaults to $SRC_ACCESS_TOKEN.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(
    repo: str,
    commit: str,
    file: str,
    github_token: str,
    root: str | None,
    indexer_name: str,
    open_browser: bool,
    get_curl: bool,
    endpoint: str | None,
    access_token: str | None,
    verbose: bool,
) -> None:
    """Upload an LSIF dump to a code intelligence server."""
    load_dotenv()
    configure_logging(verbose)

    config = Config.from_env(endpoint=endpoint, access_token=access_token)
    context = resolve_context(
        repo=repo,
        commit=commit,
        file=file,
        root=root,
        github_token=github_token,
        indexer_name=indexer_name,
    )
    upload(context, config, render=get_curl, open_browser=open_browser)


if __name__ == "__main__":
    cli()
