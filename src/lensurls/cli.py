"""lensurls CLI: build Lens patent search URLs and optionally fetch the pages.

Usage examples:
- lensurls urls "synthetic biology" --type title --rank-family
- lensurls urls crispr cas9 --boolean AND --results 120 --jurisdiction main
- lensurls fetch "synthetic biology" --results 100 --out-dir data/pages
- lensurls config-validate --config config/lens.yaml
"""
import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict

import requests
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import LensConfig, load_config
from .constants import CONFIG_ENV_VAR
from .errors import LensQueryError
from .fetch import fetch_pages, save_pages
from .query import SearchRequest, build_urls

console = Console()

_RANK_FLAGS = (
	"rank_citing",
	"rank_family",
	"rank_sequences",
	"rank_latest_publn",
	"rank_earliest_publn",
	"rank_latest_filing",
	"rank_earliest_filing",
)


# Structured logging helper
def _log_json(enabled: bool, event: str, **kwargs: Any) -> None:
	if not enabled:
		return
	payload = {"lensurls_event": event}
	payload.update(kwargs)
	print(json.dumps(payload, ensure_ascii=False))


def _load_config(args: argparse.Namespace) -> LensConfig:
	config = load_config(Path(args.config) if args.config else None)
	return config.with_overrides(throttle_sec=getattr(args, "throttle", None))


def _request_from_args(args: argparse.Namespace) -> SearchRequest:
	options: Dict[str, Any] = {
		"boolean": args.boolean,
		"type": args.type,
		"applicant": args.applicant,
		"applicant_boolean": args.applicant_boolean,
		"inventor": args.inventor,
		"inventor_boolean": args.inventor_boolean,
		"publn_date_start": args.publn_date_start,
		"publn_date_end": args.publn_date_end,
		"filing_date_start": args.filing_date_start,
		"filing_date_end": args.filing_date_end,
		"jurisdiction": args.jurisdiction,
		"families": args.families,
		"results": args.results,
		"stemming": args.stemming,
	}
	for flag in _RANK_FLAGS:
		options[flag] = getattr(args, flag)
	query = args.query[0] if len(args.query) == 1 else args.query
	return SearchRequest.from_options(query, **options)


def _add_search_arguments(p: argparse.ArgumentParser) -> None:
	p.add_argument("query", nargs="+", help="Search term(s); quote multi-word terms")
	p.add_argument("--boolean", default=None, help="AND or OR, required with several terms")
	p.add_argument("--type", default=None, help="fulltext (default), title, abstract, claims or tac")
	p.add_argument("--applicant", action="append", default=None, help="Applicant name (repeatable)")
	p.add_argument("--applicant-boolean", default=None)
	p.add_argument("--inventor", action="append", default=None, help="Inventor name (repeatable)")
	p.add_argument("--inventor-boolean", default=None)
	p.add_argument("--publn-date-start", type=int, default=None, help="YYYYMMDD")
	p.add_argument("--publn-date-end", type=int, default=None, help="YYYYMMDD")
	p.add_argument("--filing-date-start", type=int, default=None, help="YYYYMMDD")
	p.add_argument("--filing-date-end", type=int, default=None, help="YYYYMMDD")
	for flag in _RANK_FLAGS:
		p.add_argument("--" + flag.replace("_", "-"), action="store_true")
	p.add_argument("--jurisdiction", default=None, help="Two-letter code, or the groups main / ops")
	p.add_argument("--families", action="store_true", help="Group results by patent family")
	p.add_argument("--stemming", action="store_true", help="Leave word stemming on")
	p.add_argument("--results", type=int, default=None, help="Number of results, up to 500")
	p.add_argument("--config", default=os.getenv(CONFIG_ENV_VAR), help="Path to a YAML config")
	p.add_argument("--log-json", action="store_true")


def cmd_urls(args: argparse.Namespace) -> int:
	try:
		config = _load_config(args)
		result = build_urls(_request_from_args(args), config)
	except (LensQueryError, FileNotFoundError) as e:
		console.print(f"[red]Invalid search:[/red] {escape(str(e))}")
		return 1
	for url in result:
		console.print(url, soft_wrap=True, markup=False, highlight=False)
	_log_json(args.log_json, "urls_built", pages=len(result), capped=result.capped)
	return 0


def cmd_fetch(args: argparse.Namespace) -> int:
	start_ts = time.time()
	try:
		config = _load_config(args)
		result = build_urls(_request_from_args(args), config)
	except (LensQueryError, FileNotFoundError) as e:
		console.print(f"[red]Invalid search:[/red] {escape(str(e))}")
		return 1
	console.print(f"[cyan]Fetching {len(result)} page(s), {config.throttle_sec}s apart...[/cyan]")
	try:
		written = save_pages(fetch_pages(result, config), Path(args.out_dir))
	except requests.RequestException as e:
		console.print(f"[red]Fetch failed:[/red] {escape(str(e))}")
		return 1
	console.print(f"[green]Saved {len(written)} page(s) to {args.out_dir}[/green]")
	_log_json(args.log_json, "fetch_done", pages=len(written), elapsed_sec=round(time.time() - start_ts, 3))
	return 0


def cmd_config_validate(args: argparse.Namespace) -> int:
	try:
		config = load_config(Path(args.config) if args.config else None)
	except (LensQueryError, FileNotFoundError) as e:
		console.print(f"[red]Config validation failed:[/red] {escape(str(e))}")
		return 1
	table = Table(title="lensurls Config Summary")
	table.add_column("Field")
	table.add_column("Value")
	table.add_row("config_path", str(args.config or "<defaults>"))
	table.add_row("search_base", config.search_base)
	table.add_row("paginated_base", config.paginated_base)
	table.add_row("page_size", str(config.page_size))
	table.add_row("max_results", str(config.max_results))
	table.add_row("throttle_sec", str(config.throttle_sec))
	table.add_row("timeout_sec", str(config.timeout_sec))
	console.print(table)
	console.print("[green]Config validation passed.[/green]")
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="lensurls", description="Lens patent search URL builder")
	sub = parser.add_subparsers(dest="command")

	# urls
	p_urls = sub.add_parser("urls", help="Print the search URL(s) for a query")
	_add_search_arguments(p_urls)
	p_urls.set_defaults(func=cmd_urls)

	# fetch
	p_fetch = sub.add_parser("fetch", help="Fetch the raw result pages for a query")
	_add_search_arguments(p_fetch)
	p_fetch.add_argument("--out-dir", default=str(Path("data") / "pages"))
	p_fetch.add_argument("--throttle", type=float, default=None, help="Delay between requests (seconds)")
	p_fetch.set_defaults(func=cmd_fetch)

	# config-validate
	p_validate = sub.add_parser("config-validate", help="Validate and summarize a config file")
	p_validate.add_argument("--config", default=os.getenv(CONFIG_ENV_VAR), help="Path to a YAML config")
	p_validate.set_defaults(func=cmd_config_validate)

	return parser


def main(argv: Any = None) -> int:
	logging.basicConfig(level=logging.INFO)
	parser = build_parser()
	args = parser.parse_args(argv)
	if not hasattr(args, "func"):
		parser.print_help()
		return 0
	return int(args.func(args))


if __name__ == "__main__":
	sys.exit(main())
