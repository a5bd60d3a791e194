"""End-to-end scenarios of the document processing demo"""
import runpy
from unittest.mock import patch

import pytest

from docpatterns import demo
from docpatterns.core.config import DemoConfiguration
from docpatterns.documents import PDFDocument, TXTDocument
from docpatterns.demo import main, run_chain_and_strategy, run_demo, run_visitor
from docpatterns.utils.testing import output_lines


def test_run_demo(capsys, config, expected_default_output):
    run_demo(config)
    assert output_lines(capsys) == expected_default_output


def test_run_demo_default(capsys, expected_default_output):
    with patch("builtins.input") as mock_input:
        run_demo()
    mock_input.assert_not_called()
    assert output_lines(capsys) == expected_default_output


@pytest.mark.parametrize("doc_type", ["PDF", "TXT", "DOCX"])
@pytest.mark.parametrize("strategy, keyword", [("print", "Printing"), ("save", "Saving")])
def test_run_chain_and_strategy(capsys, doc_type, strategy, keyword):
    config = DemoConfiguration(doc_type=doc_type, strategy=strategy)
    assert run_chain_and_strategy(config) is True
    assert output_lines(capsys) == [
        f"[Chain] Checking format of {doc_type}...",
        f"[Chain] Security check passed for {doc_type}.",
        f"[Strategy] {keyword} {doc_type} document...",
    ]


@pytest.mark.parametrize("doc_type", ["XLS", "pdf"])
def test_run_chain_and_strategy_rejected(capsys, doc_type):
    config = DemoConfiguration(doc_type=doc_type)
    with patch("docpatterns.demo.make_strategy") as make_strategy:
        assert run_chain_and_strategy(config) is False
    make_strategy.assert_not_called()
    assert output_lines(capsys) == [
        f"[Chain] Checking format of {doc_type}...",
        "Format not supported.",
    ]


def test_run_chain_and_strategy_no_strategy(capsys):
    config = DemoConfiguration(strategy=None)
    assert run_chain_and_strategy(config) is True
    assert output_lines(capsys)[-1] == "No strategy selected."


def test_run_chain_and_strategy_custom_formats(capsys):
    config = DemoConfiguration(doc_type="DOCX", supported_formats=["PDF", "TXT"])
    assert run_chain_and_strategy(config) is False
    assert output_lines(capsys)[-1] == "Format not supported."


def test_run_visitor(capsys, config):
    structure = run_visitor(config)
    assert structure.get_all() == (PDFDocument(), TXTDocument())
    assert output_lines(capsys) == [
        "[Visitor] Displaying PDF content.",
        "[Visitor] Displaying TXT content.",
    ]


def test_run_visitor_interleaved(capsys):
    config = DemoConfiguration(documents=["DOCX", "PDF", "DOCX", "TXT"])
    run_visitor(config)
    assert output_lines(capsys) == [
        "[Visitor] Displaying DOCX content.",
        "[Visitor] Displaying PDF content.",
        "[Visitor] Displaying DOCX content.",
        "[Visitor] Displaying TXT content.",
    ]


def test_main(capsys, expected_default_output):
    with patch("builtins.input", return_value="") as mock_input:
        assert main() == 0
    mock_input.assert_called_once_with(demo.EXIT_PROMPT)
    assert output_lines(capsys) == expected_default_output


def test_main_no_pause(capsys, config, expected_default_output):
    with patch("builtins.input") as mock_input:
        assert main(config) == 0
    mock_input.assert_not_called()
    assert output_lines(capsys) == expected_default_output


def test_main_closed_stdin(capsys, expected_default_output):
    with patch("builtins.input", side_effect=EOFError):
        assert main() == 0
    assert output_lines(capsys) == expected_default_output + [""]


def test_main_rejected(capsys):
    config = DemoConfiguration(doc_type="XLS", pause=False)
    assert main(config) == 0
    lines = output_lines(capsys)
    assert lines[:3] == [
        "[Chain] Checking format of XLS...",
        "Format not supported.",
        "------------------------",
    ]
    assert not any(line.startswith("[Strategy]") for line in lines)


def test_module_entry_point(capsys, expected_default_output):
    with patch("builtins.input", return_value=""):
        with pytest.raises(SystemExit) as info:
            runpy.run_module("docpatterns", run_name="__main__")
    assert info.value.code == 0
    assert output_lines(capsys) == expected_default_output


def test_run_visitor_after_caller_mutation(capsys):
    documents = ["PDF"]
    config = DemoConfiguration(documents=documents)
    documents.append("XLS")
    structure = run_visitor(config)
    assert structure.get_all() == (PDFDocument(),)
    assert output_lines(capsys) == ["[Visitor] Displaying PDF content."]
