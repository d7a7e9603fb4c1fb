"""CLI entry point.

This script extracts job details from a posting page and prints (or writes)
the record as JSON. Optionally it saves the record to the tracker server.

Examples:
    python run_extract.py https://jobs.lever.co/acme/1234
    python run_extract.py https://jobs.lever.co/acme/1234 --html saved_page.html
    python run_extract.py https://boards.greenhouse.io/acme/jobs/1 --save --notes "Referred by Sam"
    python run_extract.py https://example.com/careers/1 --rules my_sites.yaml --out job.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import httpx
import yaml
from pydantic import ValidationError

from job_capture.client import TrackerClient, TrackerError
from job_capture.config import load_settings, load_site_rules
from job_capture.documents import SoupDocument, fetch_document
from job_capture.extractor import Extractor
from job_capture.log import get_logger
from job_capture.models import ApplicationPayload
from job_capture.sites import DEFAULT_SITE_RULES


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Extract job details from a job posting page.")
    p.add_argument("url", type=str, help="URL of the job posting page.")
    p.add_argument("--html", type=str, default=None, help="Read the page from this HTML file instead of fetching it.")
    p.add_argument("--rules", type=str, default=None, help="YAML file with an alternative site-rule table.")
    p.add_argument("--out", type=str, default=None, help="Write the JSON record to this path.")
    p.add_argument("--save", action="store_true", help="Save the record to the JobTracker server.")
    p.add_argument("--notes", type=str, default=None, help="Notes to store with the saved application.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log = get_logger("run_extract")
    settings = load_settings()

    try:
        rules = load_site_rules(args.rules) if args.rules else DEFAULT_SITE_RULES
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as exc:
        log.error("Could not load site rules from %s: %s", args.rules, exc)
        return 1

    if args.html:
        try:
            html = Path(args.html).expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.error("Could not read %s: %s", args.html, exc)
            return 1
        document = SoupDocument(html)
    else:
        try:
            document = fetch_document(args.url, timeout_s=settings.timeout_s)
        except httpx.HTTPError as exc:
            log.error("Could not load %s: %s", args.url, exc)
            return 1

    record = Extractor(rules).extract(args.url, document)
    if not record.has_details:
        log.warning("Could not extract job details from this page")

    data = json.dumps(record.model_dump(mode="json"), indent=2, ensure_ascii=False)
    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(data, encoding="utf-8")
        log.info("Wrote record to: %s", out_path)
    else:
        sys.stdout.write(data + "\n")

    if not args.save:
        return 0

    try:
        payload = ApplicationPayload.from_record(record, notes=args.notes)
    except ValidationError:
        log.error("Company and Position are required")
        return 1

    try:
        client = TrackerClient(settings.server_url, timeout_s=settings.timeout_s, cookies=settings.cookies)
        client.save_application(payload)
    except TrackerError as exc:
        log.error("%s", exc)
        return 1
    log.info("Application saved successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
