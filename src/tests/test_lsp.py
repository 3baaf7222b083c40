"""Tests for the language server glue: conversion and notification handlers."""

import pytest
from lsprotocol import types as lsp
from pygls.workspace import Workspace

from src.devex.lsp import server as dice_server
from src.devex.lsp.diagnostics import compute_diagnostics, to_lsp_diagnostic
from src.compiler.python.analyzer import analyze

URI = "file:///tmp/example.dice"


def test_compute_diagnostics_converts_in_order():
    source = "let x = 1;\n)\nif a then"
    result = compute_diagnostics(URI, source)
    assert result.uri == URI
    assert result.source == source
    assert [(d.range.start.line, d.message) for d in result.diagnostics] == [
        (0, "Semicolons are unnecessary in Dice"),
        (1, "Unmatched ')'"),
        (2, "Unclosed 'if' block, missing 'end'"),
    ]
    assert [d.severity for d in result.diagnostics] == [
        lsp.DiagnosticSeverity.Warning,
        lsp.DiagnosticSeverity.Error,
        lsp.DiagnosticSeverity.Error,
    ]
    assert all(d.source == "dice" for d in result.diagnostics)


def test_to_lsp_diagnostic_keeps_range():
    diag = analyze("  (")[0]
    converted = to_lsp_diagnostic(diag)
    assert converted.range == lsp.Range(
        start=lsp.Position(line=0, character=2),
        end=lsp.Position(line=0, character=3),
    )
    assert converted.message == "Unmatched '('"


def test_clean_document_has_no_diagnostics():
    result = compute_diagnostics(URI, "let a = 1\nif a > 0 then\n  f(a)\nend\n")
    assert result.diagnostics == []


@pytest.fixture
def published(monkeypatch):
    sent = []
    monkeypatch.setattr(dice_server.server, "text_document_publish_diagnostics", sent.append)
    return sent


def test_did_open_publishes_diagnostics(published):
    dice_server.did_open(lsp.DidOpenTextDocumentParams(
        text_document=lsp.TextDocumentItem(uri=URI, language_id="dice", version=1, text="end"),
    ))
    assert len(published) == 1
    assert published[0].uri == URI
    assert [d.message for d in published[0].diagnostics] == [
        "Unmatched 'end' with no corresponding 'if'",
    ]


def test_did_save_uses_included_text(published):
    dice_server.did_save(lsp.DidSaveTextDocumentParams(
        text_document=lsp.TextDocumentIdentifier(uri=URI),
        text="else",
    ))
    assert [d.message for d in published[0].diagnostics] == [
        "Unmatched 'else' with no open 'if'",
    ]


@pytest.fixture
def workspace(monkeypatch):
    ws = Workspace(None)
    monkeypatch.setattr(type(dice_server.server), "workspace", property(lambda self: ws))
    return ws


def _open_in(workspace, text, version=1):
    workspace.put_text_document(
        lsp.TextDocumentItem(uri=URI, language_id="dice", version=version, text=text)
    )


def test_did_change_analyzes_workspace_text(published, workspace):
    _open_in(workspace, "if a then\n  (\n", version=2)
    dice_server.did_change(lsp.DidChangeTextDocumentParams(
        text_document=lsp.VersionedTextDocumentIdentifier(uri=URI, version=2),
        content_changes=[],
    ))
    assert len(published) == 1
    assert published[0].uri == URI
    assert [(d.range.start.line, d.message) for d in published[0].diagnostics] == [
        (0, "Unclosed 'if' block, missing 'end'"),
        (1, "Unmatched '('"),
    ]


def test_did_save_without_text_analyzes_workspace_text(published, workspace):
    _open_in(workspace, "let a = 1;\nend")
    dice_server.did_save(lsp.DidSaveTextDocumentParams(
        text_document=lsp.TextDocumentIdentifier(uri=URI),
    ))
    assert [d.message for d in published[0].diagnostics] == [
        "Semicolons are unnecessary in Dice",
        "Unmatched 'end' with no corresponding 'if'",
    ]


def test_did_close_clears_diagnostics(published):
    dice_server.did_open(lsp.DidOpenTextDocumentParams(
        text_document=lsp.TextDocumentItem(uri=URI, language_id="dice", version=1, text="("),
    ))
    dice_server.did_close(lsp.DidCloseTextDocumentParams(
        text_document=lsp.TextDocumentIdentifier(uri=URI),
    ))
    assert published[-1].uri == URI
    assert published[-1].diagnostics == []


def test_initialized_logs_to_client(monkeypatch):
    logged = []
    monkeypatch.setattr(dice_server.server, "window_log_message", logged.append)
    dice_server.initialized(lsp.InitializedParams())
    assert logged == [
        lsp.LogMessageParams(type=lsp.MessageType.Info, message="Dice LSP initialized"),
    ]


def test_server_arguments():
    args = dice_server.build_arg_parser().parse_args([])
    assert not args.tcp
    assert (args.host, args.port, args.log_level) == ("127.0.0.1", 2087, "INFO")
    args = dice_server.build_arg_parser().parse_args(["--tcp", "--port", "9000", "--log-level", "DEBUG"])
    assert args.tcp and args.port == 9000 and args.log_level == "DEBUG"
