# Tests for treesync.sync.ignore
# gitignore-style path predicate

from pathlib import Path

from treesync.sync.ignore import IgnoreMatcher


class TestIgnoreMatcher:
    """Tests for rule matching on relative names."""

    def test_no_rules_accepts_everything(self):
        matcher = IgnoreMatcher([])
        assert matcher.accepts("anything.txt")
        assert matcher.accepts("deep/nested/file", is_dir=True)

    def test_glob(self):
        matcher = IgnoreMatcher(["*.tmp"])
        assert not matcher.accepts("foo.tmp")
        assert not matcher.accepts("a/b/foo.tmp")
        assert matcher.accepts("foo.txt")

    def test_negation_later_rule_wins(self):
        matcher = IgnoreMatcher(["*.log", "!keep.log"])
        assert not matcher.accepts("debug.log")
        assert matcher.accepts("keep.log")

    def test_directory_only_rule(self):
        matcher = IgnoreMatcher(["build/"])
        assert not matcher.accepts("build", is_dir=True)
        assert matcher.accepts("build", is_dir=False)
        assert not matcher.accepts("build/output.bin")

    def test_anchored_rule(self):
        matcher = IgnoreMatcher(["/cache"])
        assert not matcher.accepts("cache", is_dir=True)
        assert matcher.accepts("sub/cache", is_dir=True)

    def test_comments_and_blank_lines(self):
        matcher = IgnoreMatcher(["# comment", "", "*.bak"])
        assert matcher.accepts("# comment")
        assert not matcher.accepts("x.bak")

    def test_trailing_slash_string_means_directory(self):
        matcher = IgnoreMatcher(["node_modules/"])
        assert not matcher.accepts("node_modules/")

    def test_callable(self):
        matcher = IgnoreMatcher(["*.tmp"])
        assert matcher(Path("x.tmp"), False) is False


class TestRootRelativeMatching:
    """Tests for matching absolute paths against configured roots."""

    def test_same_verdict_under_both_roots(self, temp_dir: Path):
        source = temp_dir / "src"
        destination = temp_dir / "dst"
        matcher = IgnoreMatcher(["/top.txt", "*.tmp"], roots=[source, destination])

        assert not matcher.accepts(source / "top.txt")
        assert not matcher.accepts(destination / "top.txt")
        assert matcher.accepts(source / "sub" / "top.txt")
        assert not matcher.accepts(destination / "sub" / "x.tmp")

    def test_root_itself_is_accepted(self, temp_dir: Path):
        matcher = IgnoreMatcher(["*"], roots=[temp_dir])
        assert matcher.accepts(temp_dir, is_dir=True)

    def test_relative_name_outside_roots(self, temp_dir: Path):
        matcher = IgnoreMatcher([], roots=[temp_dir / "src"])
        assert matcher.relative_name(Path("/other/place/file.txt")) == "other/place/file.txt"
        assert matcher.relative_name(temp_dir / "src" / "a" / "b.txt") == "a/b.txt"

    def test_line_endings_stripped(self):
        matcher = IgnoreMatcher(["*.o\r\n", "!main.o\n"])
        assert not matcher.accepts("util.o")
        assert matcher.accepts("main.o")
