"""
cli.py
======
Command line entry point: check a site spec against saved HTML snapshots.
"""

import argparse
import asyncio
import json
import os
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from chatwright.automators import create_automator, detect_variant
from chatwright.config import ChatwrightSettings
from chatwright.core import SelectorVerifier, SnapshotPage
from chatwright.exceptions import ChatwrightError
from chatwright.models import (
    LOGIN_INDICATOR,
    MESSAGE_BLOCKS,
    MESSAGE_INPUT_AREA,
    MESSAGE_SUBMIT_BUTTON,
    NEW_CHAT_BUTTON,
    RECENT_CHAT_LINKS,
    AiAssistantSiteSpec,
    PageVerificationResult,
)
from chatwright.storage import load_site_spec
from chatwright.utils import setup_local_logging, setup_logfire

custom_theme = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)

# Elements a snapshot of each page role is expected to contain
SHARED_REQUIRED = (LOGIN_INDICATOR, NEW_CHAT_BUTTON, RECENT_CHAT_LINKS, MESSAGE_INPUT_AREA, MESSAGE_SUBMIT_BUTTON)
REQUIRED_ELEMENTS: dict[str, tuple[str, ...]] = {
    'landing': SHARED_REQUIRED,
    'chat': (*SHARED_REQUIRED, MESSAGE_BLOCKS),
}


def _pick_page(spec: AiAssistantSiteSpec, page: str | None, url: str) -> str:
    if page:
        return page
    return spec.page_for_url(url) or 'chat'


def print_verification(console: Console, page_role: str, result: PageVerificationResult) -> None:
    """Render a verification result as a table."""
    table = Table(title=f'Page: {page_role}')
    table.add_column('Element', style='cyan')
    table.add_column('Status')
    table.add_column('Selector')
    table.add_column('Matches', justify='right')

    for name, element in result.results.items():
        status = '[success]✓[/success]' if element.status == 'verified' else '[danger]✗[/danger]'
        if element.used_fallback:
            status += f' [warning](fallback #{element.working_index})[/warning]'
        marker = ' *' if name in result.required else ''
        table.add_row(f'{name}{marker}', status, escape(element.selector or '-'), str(element.match_count))

    console.print(table)
    if not result.success:
        console.print(f'[danger]✗ Missing required elements: {", ".join(result.missing_required)}[/danger]')
    elif not result.verified_count:
        console.print('[danger]✗ No elements matched the page[/danger]')
    else:
        console.print(f'[success]✓ {result.verified_count}/{result.total_elements} elements verified[/success]')


async def run_verify(args: argparse.Namespace, console: Console) -> int:
    spec = load_site_spec(args.spec)
    page_role = _pick_page(spec, args.page, args.url)
    page_spec = spec.page(page_role)
    snapshot = SnapshotPage.from_file(args.html, url=args.url)

    required = REQUIRED_ELEMENTS.get(page_role, ()) if args.strict else ()
    verifier = SelectorVerifier(console=console if args.verbose else None)
    result = await verifier.verify(snapshot, page_spec, required=required)
    print_verification(console, page_role, result)
    return 0 if result.success and result.verified_count else 1


async def run_extract(args: argparse.Namespace, console: Console) -> int:
    spec = load_site_spec(args.spec)
    page_role = _pick_page(spec, args.page, args.url)
    snapshot = SnapshotPage.from_file(args.html, url=args.url)
    variant = args.variant or detect_variant(args.url)

    automator = create_automator(variant, snapshot, spec.page(page_role), settings=ChatwrightSettings.from_env())
    messages = await automator.get_messages()
    output = {
        'page': page_role,
        'variant': variant,
        'loggedIn': await automator.check_login_status(),
        'chatState': await automator.get_chat_state(),
        'messages': [m.model_dump() if hasattr(m, 'model_dump') else m for m in messages],
    }
    console.print_json(json.dumps(output, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='chatwright', description='Check AI chat site specs against saved pages')
    parser.add_argument('--log-level', type=str, default=None, help='Write a run log under .chatwright/logs')

    subparsers = parser.add_subparsers(dest='command', required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--spec', type=str, required=True, help='Site spec JSON file')
    common.add_argument('--html', type=str, required=True, help='Saved page HTML')
    common.add_argument('--url', type=str, default='about:blank', help='URL the page was saved from')
    common.add_argument('--page', type=str, default=None, help='Page role (default: matched from --url, else chat)')

    verify = subparsers.add_parser('verify', parents=[common], help='Report which selectors match the page')
    verify.add_argument('--strict', action='store_true', help='Fail when required elements do not match')
    verify.add_argument('--verbose', action='store_true', help='Print every candidate tried')

    extract = subparsers.add_parser('extract', parents=[common], help='Print messages and chat state')
    extract.add_argument('--variant', type=str, default=None, help='Automator variant (default: from --url)')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    setup_logfire(os.getenv('LOGFIRE_TOKEN'), service_name='chatwright')

    args = build_parser().parse_args(argv)
    console = Console(theme=custom_theme)

    if args.log_level:
        log_file = setup_local_logging(args.log_level)
        console.print(f'[info]Logging to {log_file}[/info]')

    handlers = {'verify': run_verify, 'extract': run_extract}
    try:
        return asyncio.run(handlers[args.command](args, console))
    except (ChatwrightError, ValueError, OSError) as e:
        console.print(f'[danger]Error: {escape(str(e))}[/danger]')
        return 1


if __name__ == '__main__':
    sys.exit(main())
