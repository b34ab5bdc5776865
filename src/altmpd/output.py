#!/usr/bin/python3

import sys

import colorama
import msgspec

from .models import messages as msgtypes


class BaseMessageHandler(msgspec.Struct):
    async def handle_message(self, msg: msgtypes.BaseMessage) -> None:
        raise NotImplementedError()


class JSONLMessageHandler(BaseMessageHandler, tag="jsonl"):
    # outputs messages as newline-delimited JSON
    # this is intended for log collectors reading the proxy's standard output
    async def handle_message(self, msg: msgtypes.BaseMessage) -> None:
        print(msgspec.json.encode(msg).decode("utf8"), flush=True)


class ConsoleMessageHandler(BaseMessageHandler, tag="console"):
    # outputs human-readable lines; failures go to stderr
    async def handle_message(self, msg: msgtypes.BaseMessage) -> None:
        match msg:
            case msgtypes.StringMessage():
                print(msg.text)
            case msgtypes.ServerStartedMessage():
                print(f"Server running at http://{msg.host}:{msg.port}/")
                print(f"Static manifest: {msg.static_manifest_url}")
                print(f"Live manifest: {msg.live_manifest_url}")
            case msgtypes.RewriteRequestedMessage():
                suffix = " (defaults)" if msg.default_descriptors else ""
                print(
                    f"Rewriting {msg.source_url} with {msg.num_descriptors} "
                    f"alternative(s){suffix}"
                )
            case msgtypes.UnrecognizedModeMessage():
                print(
                    f"{colorama.Fore.YELLOW}Unrecognized mode '{msg.mode}' "
                    f"for {msg.uri}; passing through{colorama.Style.RESET_ALL}"
                )
            case msgtypes.RewriteFinishedMessage():
                print(
                    f"Rewrote {msg.source_url}: {msg.events_added} event(s) added, "
                    f"BaseURL {msg.base_location}"
                )
            case msgtypes.RewriteFailedMessage():
                print(
                    f"{colorama.Fore.RED}Error modifying the manifest {msg.source_url} "
                    f"({msg.stage}): {msg.error_type}: {msg.reason}{colorama.Style.RESET_ALL}",
                    file=sys.stderr,
                )
                if msg.cause:
                    print(f"  caused by: {msg.cause}", file=sys.stderr)
            case _:
                pass


CLIMessageHandlers = JSONLMessageHandler | ConsoleMessageHandler


async def dispatch(handlers: list[BaseMessageHandler], msg: msgtypes.BaseMessage) -> None:
    for handler in handlers:
        await handler.handle_message(msg)
