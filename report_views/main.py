"""
Report Views - Main Entry Point
Renders a report to JSON or serves the HTTP API.
"""

import argparse
import json
import sys
import time
from typing import Any, Dict, List, Optional

from config.settings import Settings
from models.errors import ReportViewError
from reports.sample_data import seed_sample_visits
from reports.visit_log import VisitLog
from utils.logger import logger
from views.view_datatable import ViewDataTable


def parse_params(pairs: List[str]) -> Dict[str, str]:
    """
    Parse 'key=value' command line pairs into query parameters.

    Raises:
        ValueError: If a pair has no '='
    """
    params = {}
    for pair in pairs or []:
        key, separator, value = pair.partition('=')
        if not separator or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


def render_report(
    module: str,
    action: str,
    params: Optional[Dict[str, Any]] = None,
    visit_log: Optional[VisitLog] = None,
    output_file: Optional[str] = None
) -> Dict[str, Any]:
    """
    Render one report.

    Args:
        module: Report module, e.g. 'Actions'
        action: Report action, e.g. 'getPageUrls'
        params: Query parameters (idSite, overrides, generic filters)
        visit_log: Data source of the report; sample visits when omitted
        output_file: Optional output file path

    Returns:
        Render payload
    """
    start_time = time.time()
    params = dict(params or {})

    if visit_log is None:
        visit_log = VisitLog()
        sample_site = seed_sample_visits(visit_log)
        params.setdefault('idSite', sample_site)

    view = ViewDataTable(module, action, params, visit_log)
    payload = view.render()

    duration_ms = (time.time() - start_time) * 1000

    if output_file:
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(json.dumps(payload, indent=2))
        logger.success(f"Report saved to: {output_file}")

    logger.success(f"Rendered {view.config.report_id} in {duration_ms:.2f}ms")
    return payload


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Report Views - render analytics reports with display overrides"
    )

    parser.add_argument(
        '--module',
        type=str,
        help='Report module (e.g., Actions)'
    )

    parser.add_argument(
        '--action',
        type=str,
        help='Report action (e.g., getPageUrls)'
    )

    parser.add_argument(
        '--id-site',
        type=int,
        help='Site to report on (default: the sample site holding the visits)'
    )

    parser.add_argument(
        '--param',
        action='append',
        default=[],
        help='Query parameter as key=value, repeatable (e.g., filter_limit=5)'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Output JSON file path (optional)'
    )

    parser.add_argument(
        '--serve',
        action='store_true',
        help='Serve the HTTP API instead of rendering a report'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=Settings.SERVER_PORT,
        help=f'Port of the HTTP API (default: {Settings.SERVER_PORT})'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    # Update settings
    if args.debug:
        Settings.update(log_level="DEBUG", debug_mode=True)
        logger.set_level(Settings.LOG_LEVEL)
        logger.debug(f"Settings: {Settings.to_dict()}")

    if args.serve:
        import uvicorn
        from web_app.api.server import create_app

        visit_log = VisitLog()
        seed_sample_visits(visit_log)

        Settings.SERVER_PORT = args.port
        uvicorn.run(create_app(visit_log), host=Settings.SERVER_HOST, port=args.port)
        return

    if not args.module or not args.action:
        parser.error('--module and --action are required unless --serve is given')

    try:
        params = parse_params(args.param)
        if args.id_site is not None:
            params['idSite'] = str(args.id_site)
        payload = render_report(args.module, args.action, params, output_file=args.output)

        print(json.dumps(payload, indent=2))
    except KeyboardInterrupt:
        logger.warning("\nRendering interrupted by user")
        sys.exit(1)
    except (ReportViewError, ValueError) as e:
        logger.error(f"\nFatal error: {str(e)}")
        sys.exit(1)


if __name__ == '__main__':
    main()
