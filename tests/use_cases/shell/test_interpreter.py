"""
Tests for the CommandInterpreter and its command handlers.
"""

from unittest.mock import MagicMock

import pytest

from portfolio_shell.entities.Command import CommandResult, EffectKind, EffectRequest
from portfolio_shell.entities.OutputLine import ERROR, OUTPUT, OutputLine
from portfolio_shell.use_cases.shell.interpreter import CommandInterpreter, tokenize
from portfolio_shell.use_cases.shell.static_text import HELP_MESSAGE


def texts(result: CommandResult) -> list[str]:
    return [line.text for line in result.lines]


class TestTokenize:
    def test_splits_on_whitespace(self):
        assert tokenize("  cd   projects  ") == ("cd", ["projects"])

    def test_empty_line(self):
        assert tokenize("   ") == ("", [])


class TestDispatch:
    """Test cases for command lookup and error reporting."""

    def test_empty_command_does_nothing(self, interpreter):
        assert interpreter.interpret("", "/") == CommandResult()
        assert interpreter.interpret("   ", "/") == CommandResult()

    def test_unknown_command(self, interpreter):
        result = interpreter.interpret("foo bar", "/")

        assert result.lines == (OutputLine.error("command not found: foo"),)
        assert result.cursor is None
        assert result.effects == ()

    def test_unknown_command_keeps_original_case(self, interpreter):
        assert texts(interpreter.interpret("FOO", "/")) == ["command not found: FOO"]

    @pytest.mark.parametrize("raw", ["PWD", "Pwd", "pwd"])
    def test_commands_are_case_insensitive(self, raw, interpreter):
        assert texts(interpreter.interpret(raw, "/about")) == ["/about"]

    def test_unexpected_error_becomes_error_line(self, email_store):
        """Test a failing port is reported as a line, not raised."""
        broken_tree = MagicMock()
        broken_tree.lookup.side_effect = RuntimeError("boom")
        logger = MagicMock()
        interpreter = CommandInterpreter(broken_tree, email_store, logger=logger)

        result = interpreter.interpret("cat readme.md", "/")

        assert result.lines == (OutputLine.error("cat: internal error"),)
        logger.exception.assert_called_once()

    def test_handled_failure_is_logged_at_info(self, file_tree, email_store):
        logger = MagicMock()
        interpreter = CommandInterpreter(file_tree, email_store, logger=logger)

        interpreter.interpret("cd nowhere", "/")

        logger.info.assert_called_once_with(
            "Command 'cd' failed: cd: nowhere: No such file or directory"
        )


class TestSystemCommands:
    def test_help(self, interpreter):
        assert texts(interpreter.interpret("help", "/")) == HELP_MESSAGE.split("\n")

    def test_neofetch(self, interpreter):
        lines = texts(interpreter.interpret("neofetch", "/"))

        assert any("OS: Portfolio OS" in line for line in lines)
        assert any("Shell: term.sh" in line for line in lines)

    def test_date_uses_clock(self, interpreter):
        assert texts(interpreter.interpret("date", "/")) == [
            "Sat Mar 09 2024 14:30:05 GMT+0000 (UTC)"
        ]

    def test_clear(self, interpreter):
        result = interpreter.interpret("clear", "/")

        assert result.lines == ()
        assert result.clear_log
        assert result.bypass_log

    def test_matrix(self, interpreter):
        result = interpreter.interpret("matrix", "/")

        assert result.lines == ()
        assert result.bypass_log
        assert not result.clear_log
        assert result.effects == (
            EffectRequest(EffectKind.START_MATRIX_EFFECT),
            EffectRequest(EffectKind.CLOSE_TERMINAL),
        )

    def test_emails_empty(self, interpreter):
        assert texts(interpreter.interpret("emails", "/")) == ["No emails collected yet."]

    def test_emails_listed(self, interpreter, email_store):
        email_store.add("a@example.com")
        email_store.add("b@example.com")

        assert texts(interpreter.interpret("emails", "/")) == [
            "Collected Emails:",
            "- a@example.com",
            "- b@example.com",
        ]

    @pytest.mark.parametrize(
        "command, path, label",
        [
            ("projects", "/projects", "Projects"),
            ("about", "/about", "About"),
            ("contact", "/contact", "Contact"),
        ],
    )
    def test_shortcuts(self, command, path, label, interpreter):
        result = interpreter.interpret(command, "/about")

        assert texts(result) == [f"Opening {label} folder..."]
        assert result.cursor == path
        assert result.effects == (EffectRequest(EffectKind.OPEN_FILE_MANAGER, path),)

    def test_shortcut_without_folder(self, email_store):
        tree = MagicMock()
        tree.lookup.return_value = None
        interpreter = CommandInterpreter(tree, email_store, logger=MagicMock())

        result = interpreter.interpret("projects", "/")

        assert result.lines == (
            OutputLine.error("projects: /projects: No such file or directory"),
        )
        assert result.cursor is None


class TestFilesystemCommands:
    def test_pwd(self, interpreter):
        assert texts(interpreter.interpret("pwd", "/projects/portfolio-os")) == [
            "/projects/portfolio-os"
        ]

    def test_ls_current_directory(self, interpreter):
        result = interpreter.interpret("ls", "/")

        assert texts(result) == ["📁 projects", "📁 about", "📁 contact", "📄 notes.txt"]
        assert [line.is_directory_entry for line in result.lines] == [True, True, True, False]
        assert all(line.kind == OUTPUT for line in result.lines)

    def test_ls_relative_path(self, interpreter):
        assert texts(interpreter.interpret("ls portfolio-os", "/projects")) == [
            "📝 overview.md",
            "🔗 source",
        ]

    def test_ls_unknown_type_glyph(self, interpreter):
        assert texts(interpreter.interpret("ls /about", "/contact")) == [
            "📝 bio.md",
            "📦 resume.pdf",
        ]

    def test_ls_empty_directory(self, interpreter):
        assert texts(interpreter.interpret("ls empty", "/projects")) == ["Directory is empty"]

    def test_ls_missing_path(self, interpreter):
        result = interpreter.interpret("ls nowhere", "/")

        assert result.lines == (OutputLine.error("ls: nowhere: No such file or directory"),)

    def test_ls_file_path(self, interpreter):
        result = interpreter.interpret("ls notes.txt", "/")

        assert result.lines == (OutputLine.error("ls: notes.txt: Not a directory"),)

    def test_cd_success(self, interpreter):
        result = interpreter.interpret("cd portfolio-os", "/projects")

        assert result.lines == ()
        assert result.cursor == "/projects/portfolio-os"

    @pytest.mark.parametrize(
        "token, cwd, expected",
        [
            ("..", "/projects/portfolio-os", "/projects"),
            ("..", "/", "/"),
            ("/", "/projects", "/"),
            ("../about/./", "/projects", "/about"),
            ("/projects//portfolio-os", "/contact", "/projects/portfolio-os"),
        ],
    )
    def test_cd_path_forms(self, token, cwd, expected, interpreter):
        assert interpreter.interpret(f"cd {token}", cwd).cursor == expected

    def test_cd_missing_argument(self, interpreter):
        result = interpreter.interpret("cd", "/projects")

        assert result.lines == (OutputLine.error("cd: missing path argument"),)
        assert result.cursor is None

    def test_cd_missing_path(self, interpreter):
        result = interpreter.interpret("cd nonexistent", "/")

        assert texts(result) == ["cd: nonexistent: No such file or directory"]
        assert result.lines[0].kind == ERROR
        assert result.cursor is None

    def test_cd_into_file(self, interpreter):
        result = interpreter.interpret("cd readme.md", "/projects")

        assert texts(result) == ["cd: readme.md: Not a directory"]
        assert result.cursor is None

    def test_cd_extra_arguments_ignored(self, interpreter):
        assert interpreter.interpret("cd about contact", "/").cursor == "/about"

    def test_cat_markdown(self, interpreter):
        assert texts(interpreter.interpret("cat readme.md", "/projects")) == ["Hello"]

    def test_cat_multiline_text(self, interpreter):
        assert texts(interpreter.interpret("cat /contact/contact.txt", "/")) == [
            "Email: hello@example.com",
            "Remote",
        ]

    def test_cat_link(self, interpreter):
        assert texts(interpreter.interpret("cat github", "/contact")) == [
            "Link: https://github.com/example",
            'Use "open" command to visit',
        ]

    def test_cat_unsupported_type(self, interpreter):
        result = interpreter.interpret("cat resume.pdf", "/about")

        assert result.lines == (
            OutputLine.error('cat: Cannot display pdf file. Use "open" instead.'),
        )

    def test_cat_directory(self, interpreter):
        assert texts(interpreter.interpret("cat projects", "/")) == [
            "cat: projects: Is a directory"
        ]

    def test_cat_missing(self, interpreter):
        assert texts(interpreter.interpret("cat nope.md", "/")) == [
            "cat: nope.md: No such file or directory"
        ]

    def test_cat_missing_argument(self, interpreter):
        assert texts(interpreter.interpret("cat", "/")) == ["cat: missing file argument"]

    def test_open_folder(self, interpreter):
        result = interpreter.interpret("open portfolio-os", "/projects")

        assert texts(result) == ["Opening folder: portfolio-os"]
        assert result.cursor == "/projects/portfolio-os"
        assert result.effects == (
            EffectRequest(EffectKind.OPEN_FILE_MANAGER, "/projects/portfolio-os"),
        )

    def test_open_root(self, interpreter):
        result = interpreter.interpret("open /", "/about")

        assert texts(result) == ["Opening folder: /"]
        assert result.cursor == "/"

    def test_open_link(self, interpreter):
        result = interpreter.interpret("open github", "/contact")

        assert texts(result) == ["Opening link: https://github.com/example"]
        assert result.cursor is None
        assert result.effects == (
            EffectRequest(EffectKind.OPEN_EXTERNAL_URL, "https://github.com/example"),
        )

    def test_open_file(self, interpreter):
        result = interpreter.interpret("open bio.md", "/about")

        assert texts(result) == ["Opening: bio.md"]
        assert result.effects == (EffectRequest(EffectKind.OPEN_FILE_VIEWER, "/about/bio.md"),)

    def test_open_missing(self, interpreter):
        result = interpreter.interpret("open nope", "/")

        assert texts(result) == ["open: nope: No such file or directory"]
        assert result.effects == ()

    def test_open_missing_argument(self, interpreter):
        assert texts(interpreter.interpret("open", "/")) == ["open: missing file argument"]

    def test_tree_current_directory(self, interpreter):
        assert texts(interpreter.interpret("tree", "/projects")) == [
            "📁 projects",
            "  📝 readme.md",
            "  📁 portfolio-os",
            "    📝 overview.md",
            "    🔗 source",
            "  📁 empty",
        ]

    def test_tree_root_line(self, interpreter):
        lines = texts(interpreter.interpret("tree /", "/about"))

        assert lines[0] == "📁 /"
        assert lines[1] == "  📁 projects"
        assert len(lines) == 14

    def test_tree_of_file(self, interpreter):
        assert texts(interpreter.interpret("tree notes.txt", "/")) == ["📄 notes.txt"]

    def test_tree_missing(self, interpreter):
        assert texts(interpreter.interpret("tree nope", "/")) == [
            "tree: nope: No such file or directory"
        ]

    def test_find(self, interpreter):
        assert texts(interpreter.interpret("find READ", "/about")) == ["/projects/readme.md"]

    def test_find_multiple_matches_in_traversal_order(self, interpreter):
        assert texts(interpreter.interpret("find o", "/")) == [
            "/projects",
            "/projects/portfolio-os",
            "/projects/portfolio-os/overview.md",
            "/projects/portfolio-os/source",
            "/about",
            "/about/bio.md",
            "/contact",
            "/contact/contact.txt",
            "/notes.txt",
        ]

    def test_find_no_match(self, interpreter):
        assert texts(interpreter.interpret("find zzz", "/")) == ["No files found matching: zzz"]

    def test_find_missing_argument(self, interpreter):
        assert texts(interpreter.interpret("find", "/")) == ["find: missing search term"]
