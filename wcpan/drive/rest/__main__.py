import asyncio
import io
import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from collections.abc import Iterable
from contextlib import ExitStack
from functools import partial
from pathlib import Path
from typing import Any, BinaryIO

import yaml

from ._api import find_operation, iter_operations
from ._client import Client, create_client
from ._descriptor import BodyKind, OperationDescriptor, ResponseKind, Scalar
from ._network import create_transport
from ._oauth import OAuth2Manager, OAuth2Storage
from .exceptions import ApiError


async def main(args: list[str] | None = None) -> int:
    if args is None:
        args = sys.argv

    kwargs = parse_args(args[1:])
    logging.basicConfig(
        level=logging.DEBUG if kwargs.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not kwargs.action:
        await kwargs.fallback_action()
        return 0

    try:
        return await kwargs.action(kwargs)
    except ApiError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1


def parse_args(args: list[str]) -> Namespace:
    parser = ArgumentParser("wdr")

    parser.add_argument(
        "-s",
        "--client-secret",
        type=Path,
        default=Path("client_secret.json"),
        help="path of the OAuth client secret (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--oauth-token",
        type=Path,
        default=Path("oauth_token.json"),
        help="path of the OAuth token file (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print debug logs",
    )

    commands = parser.add_subparsers()

    op_parser = commands.add_parser(
        "operations",
        aliases=["ops"],
        help="list every operation [offline]",
    )
    op_parser.set_defaults(action=action_operations)

    auth_parser = commands.add_parser(
        "auth",
        aliases=["a"],
        help="authorize this client",
    )
    auth_parser.add_argument(
        "--scope",
        dest="scopes",
        action="append",
        help="request this scope (repeatable, default: full drive access)",
    )
    auth_parser.set_defaults(action=action_auth)

    call_parser = commands.add_parser(
        "call",
        aliases=["c"],
        help="call one operation, e.g. `files.get -p file_id=root`",
    )
    call_parser.add_argument("operation", type=str)
    call_parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="operation parameter (repeatable)",
    )
    call_parser.add_argument(
        "--body",
        type=str,
        help="JSON request body",
    )
    call_parser.add_argument(
        "--upload",
        type=Path,
        help="file to upload as media body",
    )
    call_parser.add_argument(
        "--output",
        type=Path,
        help="write streamed content to this file (default: stdout)",
    )
    call_parser.add_argument(
        "--scope",
        dest="scopes",
        action="append",
        help="use this scope instead of the default ones (repeatable)",
    )
    call_parser.set_defaults(action=action_call)

    sout = io.StringIO()
    parser.print_help(sout)
    fallback = partial(action_help, sout.getvalue())
    parser.set_defaults(action=None, fallback_action=fallback)

    kwargs = parser.parse_args(args)

    return kwargs


async def action_help(message: str) -> None:
    print(message)


async def action_operations(kwargs: Namespace) -> int:
    for descriptor in iter_operations():
        print(f"{descriptor.name} {descriptor.method} {descriptor.path}")
    return 0


async def action_auth(kwargs: Namespace) -> int:
    storage = OAuth2Storage(
        client_secret=kwargs.client_secret,
        oauth_token=kwargs.oauth_token,
    )
    oauth = OAuth2Manager(storage)
    url = oauth.build_authorization_url(kwargs.scopes)
    print("Visit this URL to authorize:")
    print(url)
    answer = input("Paste the code or the redirected URL: ")
    async with create_transport() as transport:
        await oauth.accept_code(transport.session, answer.strip())
    print("ok")
    return 0


async def action_call(kwargs: Namespace) -> int:
    try:
        descriptor = find_operation(kwargs.operation)
    except KeyError as e:
        print(e.args[0], file=sys.stderr)
        return 1

    params = parse_params(descriptor, kwargs.params)
    body = load_body(descriptor, kwargs.body, kwargs.upload)

    async with create_client(
        client_secret=kwargs.client_secret,
        oauth_token=kwargs.oauth_token,
    ) as client:
        if descriptor.response is not ResponseKind.STREAM:
            rv = await call(client, descriptor, body, params, kwargs.scopes)
            if rv is not None:
                print_as_yaml(rv)
            return 0

        with ExitStack() as stack:
            sink = open_sink(stack, kwargs.output)
            await call(client, descriptor, body, params, kwargs.scopes, sink=sink)
            sink.flush()
    return 0


async def call(
    client: Client,
    descriptor: OperationDescriptor,
    body: Any,
    params: dict[str, Scalar],
    scopes: Iterable[str] | None,
    *,
    sink: BinaryIO | None = None,
) -> Any:
    return await client.executor.execute(
        descriptor,
        params,
        body=body,
        sink=sink,
        scopes=scopes,
    )


def parse_params(
    descriptor: OperationDescriptor, pairs: Iterable[str]
) -> dict[str, Scalar]:
    types = {_.key: _.value_type for _ in descriptor.query}
    rv: dict[str, Scalar] = {}
    for pair in pairs:
        key, sep, text = pair.partition("=")
        if not sep:
            raise SystemExit(f"invalid parameter `{pair}`, expected KEY=VALUE")
        rv[key] = parse_value(text, types.get(key, str))
    return rv


def parse_value(text: str, type_: type[Scalar]) -> Scalar:
    if type_ is bool and text in ("true", "false"):
        return text == "true"
    if type_ is int:
        try:
            return int(text)
        except ValueError:
            return text
    return text


def load_body(
    descriptor: OperationDescriptor, body: str | None, upload: Path | None
) -> Any:
    if descriptor.body is BodyKind.MEDIA:
        if upload is None:
            raise SystemExit(f"{descriptor.name} requires --upload")
        return upload.read_bytes()
    if body is None:
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise SystemExit(f"invalid JSON body: {e}") from e


def open_sink(stack: ExitStack, output: Path | None) -> BinaryIO:
    if output is None:
        return sys.stdout.buffer
    return stack.enter_context(output.open("wb"))


def print_as_yaml(data: Any) -> None:
    yaml.safe_dump(
        data,
        stream=sys.stdout,
        allow_unicode=True,
        default_flow_style=False,
    )


def run() -> int:
    return asyncio.run(main())


if __name__ == "__main__":
    sys.exit(run())
