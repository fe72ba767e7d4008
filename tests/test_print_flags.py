"""
Tests for the composite PrintFlags selector.
"""

import click
import pytest
from click.testing import CliRunner

from printflags.errors import NoCompatiblePrinterError
from printflags.printers import (
    NamePrinter,
    NamePrintFlags,
    PrinterSelector,
    PrintFlags,
    ResourcePrinterFunc,
    new_print_flags,
)


class TestNewPrintFlags:
    """Tests for new_print_flags."""

    def test_wraps_name_flags(self):
        flags = new_print_flags("created", dry_run=True)
        assert isinstance(flags.name_print_flags, NamePrintFlags)
        assert flags.name_print_flags.operation == "created"
        assert flags.name_print_flags.dry_run is True
        assert flags.output_format is None

    def test_is_a_printer_selector(self):
        assert isinstance(new_print_flags("created"), PrinterSelector)

    def test_allowed_formats(self):
        assert new_print_flags("created").allowed_formats() == ["name"]


class TestComplete:
    """Tests for PrintFlags.complete."""

    def test_applies_template(self, pod):
        flags = new_print_flags("created").complete("%s (server dry run)")
        assert flags.name_print_flags.operation == "created (server dry run)"
        assert flags.to_printer("").render(pod) == "pod/foo created (server dry run)\n"

    def test_returns_copy(self):
        original = new_print_flags("created")
        original.complete("%s!")
        assert original.name_print_flags.operation == "created"


class TestWithDefaultOutput:
    """Tests for PrintFlags.with_default_output."""

    def test_sets_unset_format(self):
        flags = new_print_flags("created").with_default_output("name")
        assert flags.output_format == "name"

    def test_keeps_existing_format(self):
        flags = PrintFlags(output_format="name").with_default_output("json")
        assert flags.output_format == "name"


class TestToPrinter:
    """Tests for PrintFlags.to_printer."""

    def test_explicit_format(self, pod):
        printer = new_print_flags("deleted").to_printer("name")
        assert isinstance(printer, NamePrinter)
        assert printer.render(pod) == "pod/foo\n"

    def test_falls_back_to_output_format(self, pod):
        printer = new_print_flags("deleted").with_default_output("name").to_printer()
        assert printer.render(pod) == "pod/foo\n"

    def test_no_format_prints_message(self, pod):
        printer = new_print_flags("deleted", dry_run=True).to_printer()
        assert printer.render(pod) == "pod/foo deleted (dry run)\n"

    def test_explicit_empty_overrides_default(self, pod):
        printer = new_print_flags("deleted").with_default_output("name").to_printer("")
        assert printer.render(pod) == "pod/foo deleted\n"

    def test_unsupported_format(self):
        flags = new_print_flags("created")
        with pytest.raises(NoCompatiblePrinterError) as exc_info:
            flags.to_printer("yaml")
        assert exc_info.value.output_format == "yaml"
        assert exc_info.value.allowed_formats == ["name"]
        assert exc_info.value.options is flags

    def test_error_message(self):
        with pytest.raises(NoCompatiblePrinterError) as exc_info:
            new_print_flags("created").to_printer("wide")
        assert str(exc_info.value) == (
            'unable to match a printer suitable for the output format "wide", allowed formats are: name'
        )

    def test_tries_selectors_in_order(self, pod, monkeypatch):
        class EchoSelector(PrinterSelector):
            def allowed_formats(self):
                return ["echo"]

            def to_printer(self, output_format):
                if output_format != "echo":
                    raise NoCompatiblePrinterError(output_format, self.allowed_formats(), options=self)
                return ResourcePrinterFunc(lambda obj: "echo\n")

        flags = new_print_flags("created")
        monkeypatch.setattr(PrintFlags, "selectors", property(lambda self: [self.name_print_flags, EchoSelector()]))

        assert flags.allowed_formats() == ["name", "echo"]
        assert flags.to_printer("echo").render(pod) == "echo\n"
        assert flags.to_printer("name").render(pod) == "pod/foo\n"
        with pytest.raises(NoCompatiblePrinterError) as exc_info:
            flags.to_printer("json")
        assert exc_info.value.allowed_formats == ["echo", "name"]


class TestRegisterFlags:
    """Tests for PrintFlags.register_flags."""

    def test_adds_output_option(self):
        command = click.Command("create")
        new_print_flags("created").register_flags(command)

        options = [p for p in command.params if p.name == "output"]
        assert len(options) == 1
        assert options[0].opts == ["-o", "--output"]
        assert "name" in options[0].help

    def test_idempotent(self):
        command = click.Command("create")
        flags = new_print_flags("created")
        flags.register_flags(command)
        flags.register_flags(command)
        assert len([p for p in command.params if p.name == "output"]) == 1

    def test_option_default_from_output_format(self):
        command = click.Command("create")
        new_print_flags("created").with_default_output("name").register_flags(command)
        assert command.params[0].default == "name"

    def test_registered_option_drives_selection(self, pod):
        flags = new_print_flags("created")

        def callback(output):
            click.echo(flags.to_printer(output).render(pod), nl=False)

        command = click.Command("create", callback=callback)
        flags.register_flags(command)
        runner = CliRunner()

        assert runner.invoke(command, []).output == "pod/foo created\n"
        assert runner.invoke(command, ["-o", "name"]).output == "pod/foo\n"
