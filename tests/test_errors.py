#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from mini_ini.errors.base import (ErrorHandler,
                                  ErrorHandlerChain,
                                  exit_code_for)
from mini_ini.errors.exceptions import (ConversionError,
                                        FileError,
                                        FormatError,
                                        IniError,
                                        SettingsError)
from mini_ini.errors.console_handler import ConsoleErrorHandler
from mini_ini.errors.logger_handler import LoggerErrorHandler
from mini_ini.store import IniStore


class TestExceptions(unittest.TestCase):
    """Tests pour la hiérarchie d'exceptions."""

    def test_all_inherit_from_ini_error(self):
        for error_type in (FormatError, FileError, ConversionError,
                           SettingsError):
            self.assertTrue(issubclass(error_type, IniError))

    def test_format_error_carries_line(self):
        error = FormatError("ligne invalide", 7)
        self.assertEqual(error.line, 7)
        self.assertEqual(str(error), "ligne invalide")

    def test_file_error_carries_filename(self):
        error = FileError("échec", "app.ini")
        self.assertEqual(error.filename, "app.ini")
        self.assertEqual(FileError("échec").filename, "")

    def test_conversion_error_message(self):
        error = ConversionError("net", "port", "abc", "int")
        self.assertIsInstance(error, ValueError)
        self.assertIn("[net] port = 'abc'", str(error))
        self.assertIn("int", str(error))


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.handler = ConsoleErrorHandler()

    @patch("builtins.print")
    def test_handle_format_error(self, mock_print):
        """Vérifie le message pour FormatError."""
        self.handler.handle(FormatError("ligne invalide", 3))
        mock_print.assert_any_call("\n🛑 FormatError: ligne invalide")
        mock_print.assert_any_call(
            "\n🔧 Solution : Corrigez la ligne 3 (attendu: "
            "[section] ou clé = valeur)."
        )

    @patch("builtins.print")
    def test_handle_file_error(self, mock_print):
        """Vérifie le message pour FileError."""
        self.handler.handle(FileError("non ouvrable", "app.ini"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez le chemin du fichier lié et les "
            "permissions d'écriture."
        )

    @patch("builtins.print")
    def test_handle_conversion_error(self, mock_print):
        """Vérifie le message pour ConversionError."""
        self.handler.handle(ConversionError("a", "k", "x", "int"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez le type de la valeur dans le "
            "fichier INI."
        )

    @patch("builtins.print")
    def test_handle_settings_error(self, mock_print):
        """Vérifie le message pour SettingsError."""
        self.handler.handle(SettingsError("invalide"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez votre fichier de paramètres."
        )

    @patch("builtins.print")
    def test_handle_generic_ini_error(self, mock_print):
        """Vérifie le message par défaut pour IniError."""
        self.handler.handle(IniError("générique"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Voir les suggestions ci-dessus."
        )

    @patch("builtins.print")
    def test_custom_solution_takes_precedence(self, mock_print):
        """Vérifie qu'une solution fournie remplace celle par défaut."""
        handler = ConsoleErrorHandler({FileError: "Créez le dossier."})
        handler.handle(FileError("non ouvrable"))
        mock_print.assert_any_call("\n🔧 Solution : Créez le dossier.")

    @patch("builtins.print")
    def test_handle_unknown_error(self, mock_print):
        """Vérifie l'affichage d'une erreur inattendue."""
        self.handler.handle(RuntimeError("boom"))
        mock_print.assert_any_call("\n💥 Erreur inattendue: boom")
        mock_print.assert_any_call("Type: RuntimeError")


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock()
        self.handler = LoggerErrorHandler(self.logger)

    def test_log_format_error_with_line(self):
        self.handler.handle(FormatError("ligne invalide", 4))
        self.logger.log_error.assert_called_once_with(
            "FormatError (ligne 4): ligne invalide"
        )

    def test_log_known_error(self):
        self.handler.handle(FileError("non ouvrable"))
        self.logger.log_error.assert_called_once_with(
            "FileError: non ouvrable"
        )

    def test_log_unknown_error(self):
        self.handler.handle(KeyError("x"))
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: KeyError: 'x'"
        )


class TestExitCodes(unittest.TestCase):
    """Tests pour exit_code_for."""

    def test_codes_by_error_type(self):
        self.assertEqual(exit_code_for(FormatError("x", 1)), 65)
        self.assertEqual(exit_code_for(ConversionError("a", "k", "v",
                                                       "int")), 65)
        self.assertEqual(exit_code_for(FileError("x")), 74)
        self.assertEqual(exit_code_for(SettingsError("x")), 78)
        self.assertEqual(exit_code_for(IniError("x")), 1)
        self.assertEqual(exit_code_for(RuntimeError("x")), 1)


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_handlers_called_in_order(self):
        calls = []
        first = MagicMock(spec=ErrorHandler)
        first.handle.side_effect = lambda e: calls.append("first")
        second = MagicMock(spec=ErrorHandler)
        second.handle.side_effect = lambda e: calls.append("second")

        chain = ErrorHandlerChain().add_handler(first).add_handler(second)
        reached = chain.handle(IniError("x"))

        self.assertEqual(calls, ["first", "second"])
        self.assertEqual(reached, 2)
        self.assertEqual(chain.handlers, [first, second])

    def test_handlers_filtered_by_error_type(self):
        format_handler = MagicMock(spec=ErrorHandler)
        file_handler = MagicMock(spec=ErrorHandler)
        chain = (ErrorHandlerChain()
                 .add_handler(format_handler, FormatError)
                 .add_handler(file_handler, FileError, SettingsError))

        error = FileError("non ouvrable")
        reached = chain.handle(error)

        self.assertEqual(reached, 1)
        format_handler.handle.assert_not_called()
        file_handler.handle.assert_called_once_with(error)

    def test_handle_and_exit_uses_error_code(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(handler)
        error = FileError("non ouvrable")

        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(error)

        self.assertEqual(ctx.exception.code, 74)
        handler.handle.assert_called_once_with(error)

    def test_handle_and_exit_explicit_code(self):
        chain = ErrorHandlerChain()

        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(FormatError("x", 1), exit_code=3)

        self.assertEqual(ctx.exception.code, 3)

    def test_guard_exits_on_ini_error(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(handler)

        with self.assertRaises(SystemExit) as ctx:
            with chain.guard():
                raise FormatError("ligne invalide", 2)

        self.assertEqual(ctx.exception.code, 65)
        handler.handle.assert_called_once()

    def test_guard_reraises_without_exit(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(handler)

        with self.assertRaises(FileError):
            with chain.guard(exit_on_error=False):
                raise FileError("non ouvrable")

        handler.handle.assert_called_once()

    def test_guard_ignores_other_errors(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(handler)

        with self.assertRaises(KeyError):
            with chain.guard():
                raise KeyError("x")

        handler.handle.assert_not_called()

    def test_guard_around_store_open(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(handler, FormatError)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "app.ini"
            path.write_text("[a]\nbroken\n", encoding="utf-8")

            with self.assertRaises(SystemExit) as ctx:
                with chain.guard():
                    IniStore(path, autosync=True)

            self.assertEqual(ctx.exception.code, 65)
            error = handler.handle.call_args[0][0]
            self.assertEqual(error.line, 2)
            self.assertEqual(path.read_text(encoding="utf-8"),
                             "[a]\nbroken\n")


if __name__ == "__main__":
    unittest.main()
