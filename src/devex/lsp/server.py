#!/usr/bin/env python3
"""Dice Language Server.

Publishes diagnostics for .dice files by running the analyzer on the full
document text whenever it is opened, changed, or saved.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

# Add project root to sys.path so we can import src.compiler.python
PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from lsprotocol import types as lsp  # noqa: E402
from pygls.lsp.server import LanguageServer  # noqa: E402

from src.devex.lsp.diagnostics import compute_diagnostics  # noqa: E402

SERVER_NAME = "dice-lsp"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(SERVER_NAME)

# The analyzer only ever sees complete documents
server = LanguageServer(
    SERVER_NAME,
    SERVER_VERSION,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)


def _validate_document(uri: str, source: str):
    """Run the analyzer and publish diagnostics."""
    result = compute_diagnostics(uri, source)
    logger.debug("%s: %d diagnostic(s)", uri, len(result.diagnostics))
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=result.diagnostics)
    )


@server.feature(lsp.INITIALIZED)
def initialized(params: lsp.InitializedParams):
    logger.info("Dice LSP initialized")
    server.window_log_message(
        lsp.LogMessageParams(type=lsp.MessageType.Info, message="Dice LSP initialized")
    )


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams):
    _validate_document(
        params.text_document.uri,
        params.text_document.text,
    )


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_SAVE)
def did_save(params: lsp.DidSaveTextDocumentParams):
    uri = params.text_document.uri
    if params.text is not None:
        source = params.text
    else:
        source = server.workspace.get_text_document(uri).source
    _validate_document(uri, source)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    logger.debug("%s: closed", uri)
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=[])
    )


def build_arg_parser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(prog="dice-lsp", description="Dice language server")
    argparser.add_argument("--tcp", action="store_true",
                           help="Listen on TCP instead of stdio")
    argparser.add_argument("--host", default="127.0.0.1", help="TCP host (default: 127.0.0.1)")
    argparser.add_argument("--port", type=int, default=2087, help="TCP port (default: 2087)")
    argparser.add_argument("--log-level", default="INFO",
                           choices=("DEBUG", "INFO", "WARNING", "ERROR"),
                           help="Log level for stderr logging (default: INFO)")
    return argparser


def main(argv: Optional[list[str]] = None):
    args = build_arg_parser().parse_args(argv)
    # stdout carries the protocol in stdio mode
    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)

    if args.tcp:
        logger.info("Starting %s %s on %s:%d", SERVER_NAME, SERVER_VERSION, args.host, args.port)
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting %s %s on stdio", SERVER_NAME, SERVER_VERSION)
        server.start_io()


if __name__ == "__main__":
    main()
