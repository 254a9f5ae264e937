import functools
import json
import logging
import os
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import click
import requests
from dotenv import load_dotenv

from jirasoap.exceptions import (
    JiraSoapAuthenticationError,
    JiraSoapError,
    JiraSoapFaultError,
)
from jirasoap.jira import JiraSoapClient, JiraSoapConfig, JiraSoapFetcher
from jirasoap.models import FieldValue, Issue, NamedEntity, Worklog
from jirasoap.utils import parse_date
from jirasoap.utils.logging import setup_logging

__version__ = "0.1.0"

logger = logging.getLogger("jira-soap")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn library and configuration errors into click errors."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except JiraSoapAuthenticationError as e:
            error_msg = f"Authentication failed: {e.faultstring}"
            raise click.ClickException(error_msg) from e
        except JiraSoapFaultError as e:
            raise click.ClickException(e.faultstring or str(e)) from e
        except (JiraSoapError, ValueError) as e:
            raise click.ClickException(str(e)) from e
        except requests.RequestException as e:
            raise click.ClickException(f"Request to JIRA failed: {e}") from e

    return wrapper


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option("--jira-url", help="JIRA base URL (e.g., https://jira.your-company.com)")
@click.option("--jira-username", help="JIRA username for the SOAP login")
@click.option("--jira-password", help="JIRA password for the SOAP login")
@click.option("--jira-soap-token", help="Existing SOAP session token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: int,
    env_file: str | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_password: str | None,
    jira_soap_token: str | None,
    jira_ssl_verify: bool,
) -> None:
    """JIRA SOAP client - query and update issues on legacy JIRA servers.

    Settings come from the environment (JIRA_URL, JIRA_USERNAME,
    JIRA_PASSWORD or JIRA_SOAP_TOKEN), a .env file, or the options below.
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    elif _env_flag("JIRA_SOAP_VERY_VERBOSE"):
        current_logging_level = logging.DEBUG
    elif _env_flag("JIRA_SOAP_VERBOSE"):
        current_logging_level = logging.INFO
    else:
        current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    def was_option_provided(param_name: str) -> bool:
        return ctx.get_parameter_source(param_name) not in (
            click.core.ParameterSource.DEFAULT,
            click.core.ParameterSource.DEFAULT_MAP,
        )

    # Options override the environment for JiraSoapConfig.from_env
    if was_option_provided("jira_url"):
        os.environ["JIRA_URL"] = jira_url
    if was_option_provided("jira_username"):
        os.environ["JIRA_USERNAME"] = jira_username
    if was_option_provided("jira_password"):
        os.environ["JIRA_PASSWORD"] = jira_password
    if was_option_provided("jira_soap_token"):
        os.environ["JIRA_SOAP_TOKEN"] = jira_soap_token
    if was_option_provided("jira_ssl_verify"):
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()

    ctx.ensure_object(dict)


def _fetcher(ctx: click.Context) -> JiraSoapFetcher:
    fetcher = ctx.obj.get("fetcher")
    if fetcher is None:
        fetcher = JiraSoapFetcher()
        ctx.obj["fetcher"] = fetcher
    return fetcher


@main.command()
@click.argument("jql")
@click.option("--limit", default=50, show_default=True, help="Maximum issues")
@click.pass_context
@handle_errors
def search(ctx: click.Context, jql: str, limit: int) -> None:
    """Print the key and summary of issues matching JQL."""
    for issue in _fetcher(ctx).issues_from_jql_search(jql, max_results=limit):
        click.echo(f"{issue.key}\t{issue.summary}")


@main.command()
@click.argument("issue_key")
@click.pass_context
@handle_errors
def issue(ctx: click.Context, issue_key: str) -> None:
    """Print an issue as JSON."""
    click.echo(_fetcher(ctx).issue_with_key(issue_key).model_dump_json(indent=2))


@main.command()
@click.argument("issue_key")
@click.pass_context
@handle_errors
def actions(ctx: click.Context, issue_key: str) -> None:
    """Print the workflow actions available for an issue."""
    for action in _fetcher(ctx).available_actions(issue_key):
        click.echo(f"{action.id}\t{action.name}")


@main.command()
@click.argument("issue_key")
@click.pass_context
@handle_errors
def worklogs(ctx: click.Context, issue_key: str) -> None:
    """Print the worklogs of an issue as JSON."""
    entries = _fetcher(ctx).get_worklogs(issue_key)
    click.echo(json.dumps([w.to_simplified_dict() for w in entries], indent=2))


@main.command("log-work")
@click.argument("issue_key")
@click.argument("time_spent")
@click.option("--comment", default="", help="Worklog comment")
@click.option("--started", help="ISO 8601 start time (default: now)")
@click.pass_context
@handle_errors
def log_work(
    ctx: click.Context,
    issue_key: str,
    time_spent: str,
    comment: str,
    started: str | None,
) -> None:
    """Log TIME_SPENT (e.g. '1h 30m') on an issue."""
    start_date = parse_date(started) if started else datetime.now(timezone.utc)
    worklog = Worklog(comment=comment, start_date=start_date, time_spent=time_spent)
    stored = _fetcher(ctx).add_worklog_and_auto_adjust_remaining_estimate(
        issue_key, worklog
    )
    if stored.id:
        click.echo(f"Added worklog {stored.id} to {issue_key}")
    else:
        click.echo(f"Added worklog to {issue_key}")


__all__ = [
    "main",
    "__version__",
    "FieldValue",
    "Issue",
    "JiraSoapAuthenticationError",
    "JiraSoapClient",
    "JiraSoapConfig",
    "JiraSoapError",
    "JiraSoapFaultError",
    "JiraSoapFetcher",
    "NamedEntity",
    "Worklog",
]

if __name__ == "__main__":
    main()
