"""Tests for Ant pattern handling."""

from __future__ import annotations

from pmdscan.file_selector.patterns import (
    PatternSet,
    compile_patterns,
    join_patterns,
    match_path,
    normalize_pattern,
    split_patterns,
    to_gitignore_pattern,
)


def test_split_patterns_handles_comma_lists():
    assert split_patterns(["**/*.java, **/*.jav", "", " src/** "]) == [
        "**/*.java",
        "**/*.jav",
        "src/**",
    ]


def test_join_patterns():
    assert join_patterns(["a", "b"]) == "a,b"
    assert join_patterns([]) == ""


def test_normalize_pattern():
    assert normalize_pattern("./gen/") == "gen/**"
    assert normalize_pattern("/com//acme/*.java") == "com/acme/*.java"
    assert normalize_pattern("com\\acme\\*.java") == "com/acme/*.java"


def test_to_gitignore_pattern():
    assert to_gitignore_pattern("**/*.java") == "**/*.java"
    assert to_gitignore_pattern("**") == "**"
    assert to_gitignore_pattern("*.java") == "/*.java"
    assert to_gitignore_pattern("com/acme/**") == "/com/acme/**"
    assert to_gitignore_pattern("./gen/") == "/gen/**"
    assert to_gitignore_pattern("!Keep.java") == "/!Keep.java"


def test_match_path_anchored_at_root():
    assert match_path("Foo.java", "**/*.java")
    assert match_path("com/acme/Foo.java", "**/*.java")
    assert match_path("notes.txt", "*.txt")
    assert not match_path("docs/notes.txt", "*.txt")
    assert not match_path("Foo.javax", "**/*.java")


def test_match_path_single_star_stays_in_segment():
    assert match_path("com/acme/Foo.java", "com/*/Foo.java")
    assert not match_path("com/acme/deep/Foo.java", "com/*/Foo.java")
    assert match_path("com/acme/deep/Foo.java", "com/**/Foo.java")
    assert match_path("com/Foo.java", "com/**/Foo.java")


def test_match_path_question_mark_and_case():
    assert match_path("A1.java", "A?.java")
    assert not match_path("A12.java", "A?.java")
    assert not match_path("foo.JAVA", "**/*.java")


def test_match_path_does_not_reach_into_matching_directories():
    assert not match_path("pkg.java/notes.txt", "**/*.java")
    assert not match_path("model/A.java", "**/model")
    assert match_path("model", "**/model")
    assert not match_path("foo~/Keep.java", "**/*~")


def test_match_path_subtree_patterns_cover_contents():
    assert match_path("CVS/Entries", "**/CVS/**")
    assert match_path("pkg/CVS/Foo.java", "**/CVS/**")
    assert not match_path("pkg/CVSFoo.java", "**/CVS/**")


def test_pattern_set_files_and_directories():
    patterns = PatternSet(["**/*~", "**/CVS/**, gen/"])
    assert patterns.match_file("Foo.java~")
    assert patterns.match_file("gen/A.java")
    assert not patterns.match_file("foo~/Keep.java")

    assert patterns.match_dir("CVS")
    assert patterns.match_dir("pkg/CVS")
    assert patterns.match_dir("gen")
    assert not patterns.match_dir("pkg/gen")
    assert not patterns.match_dir("foo~")


def test_compile_patterns_is_anchored():
    spec = compile_patterns(["*.java"])
    assert spec.match_file("Foo.java")
    assert not spec.match_file("pkg/Foo.java")
