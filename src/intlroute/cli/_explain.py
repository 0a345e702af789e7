"""``intlroute resolve`` — preview the routing decision for a request.

Builds a synthetic request from the command-line flags, runs it
through the engine, and prints the resolution and side effects.
"""

import argparse

from intlroute.cli._check import load_or_exit
from intlroute.config import COOKIE_LOCALE_NAME
from intlroute.http.request import Request
from intlroute.i18n.routing import LocaleRouting


def run_explain(args: argparse.Namespace) -> None:
    config = load_or_exit(args.target)

    headers: dict[str, str] = {}
    if args.accept_language:
        headers["accept-language"] = args.accept_language
    cookies = {COOKIE_LOCALE_NAME: args.cookie} if args.cookie else None
    request = Request.build(
        args.path,
        host=args.host,
        headers=headers,
        cookies=cookies,
        scheme=args.scheme,
    )

    outcome = LocaleRouting(config).route(request)
    decision = outcome.decision
    print(f"locale:   {outcome.locale} ({outcome.resolution.source.value})")
    if outcome.resolution.matched_domain is not None:
        print(f"domain:   {outcome.resolution.matched_domain.domain}")
    if outcome.is_redirect:
        print(f"decision: redirect -> {outcome.location}")
    else:
        print(f"decision: rewrite -> {decision.target_path}")
    print(f"cookie:   {outcome.cookie.to_header_value()}")
    if outcome.link_header:
        print(f"link:     {outcome.link_header}")
