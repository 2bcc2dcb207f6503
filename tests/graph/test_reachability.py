"""Tests for unused-module detection."""

import pytest

from elmsweep.exceptions import ConfigurationError, FileAccessError
from elmsweep.graph import analyze_reachability, find_unused
from elmsweep.project import Module, ProjectConfig, build_project


def _names(paths):
    return sorted(p.rsplit("/", 1)[-1] for p in paths)


def _application(root, entry="src/Main.elm", **kwargs):
    return build_project(ProjectConfig(kind="application", root=root, entry_file=entry, **kwargs))


def _package(root, exposed, **kwargs):
    return build_project(ProjectConfig(kind="package", root=root, exposed_modules=exposed, **kwargs))


class TestApplicationReachability:
    def test_chain_with_orphan(self, chain_project):
        project = _application(chain_project)
        result = analyze_reachability(project)

        assert result.roots == ("Main",)
        assert result.reachable == {"Main", "Page", "Widget"}
        assert _names(result.unused) == ["Orphan.elm"]
        assert list(result.unused_modules.values()) == ["Orphan"]

    def test_find_unused_matches_analysis(self, chain_project):
        project = _application(chain_project)
        assert find_unused(project) == analyze_reachability(project).unused

    def test_cycle_is_reachable(self, write_files):
        root = write_files(
            {
                "src/Main.elm": "module Main exposing (main)\nimport A\n",
                "src/A.elm": "module A exposing (..)\nimport B\n",
                "src/B.elm": "module B exposing (..)\nimport A\n",
                "src/C.elm": "module C exposing (..)\nimport C\n",
            }
        )
        result = analyze_reachability(_application(root))
        assert result.reachable == {"Main", "A", "B"}
        assert _names(result.unused) == ["C.elm"]

    def test_self_importing_entry(self, write_files):
        root = write_files({"src/Main.elm": "module Main exposing (main)\nimport Main\n"})
        assert find_unused(_application(root)) == []

    def test_unreachable_cycle(self, write_files):
        root = write_files(
            {
                "src/Main.elm": "module Main exposing (main)\n",
                "src/A.elm": "module A exposing (..)\nimport B\n",
                "src/B.elm": "module B exposing (..)\nimport A\n",
            }
        )
        assert _names(find_unused(_application(root))) == ["A.elm", "B.elm"]

    def test_nested_module_names(self, write_files):
        root = write_files(
            {
                "src/Main.elm": "module Main exposing (main)\nimport Page.Home\n",
                "src/Page/Home.elm": "module Page.Home exposing (view)\n",
                "src/Page/About.elm": "module Page.About exposing (view)\n",
            }
        )
        result = analyze_reachability(_application(root))
        assert list(result.unused_modules.values()) == ["Page.About"]

    def test_import_in_comment_does_not_count(self, write_files):
        root = write_files(
            {
                "src/Main.elm": "module Main exposing (main)\n\n-- import Old\n\nmain =\n    1\n",
                "src/Old.elm": "module Old exposing (..)\n",
            }
        )
        assert _names(find_unused(_application(root))) == ["Old.elm"]

    def test_entry_outside_source_dirs(self, write_files):
        root = write_files(
            {
                "app/Main.elm": "module Main exposing (main)\nimport Shared\n",
                "src/Shared.elm": "module Shared exposing (..)\n",
                "src/Unused.elm": "module Unused exposing (..)\n",
            }
        )
        result = analyze_reachability(_application(root, entry="app/Main.elm"))
        assert "Shared" in result.reachable
        assert _names(result.unused) == ["Unused.elm"]

    def test_excluded_file_is_never_reported(self, chain_project):
        project = _application(chain_project, exclude_files=["src/Orphan.elm"])
        assert find_unused(project) == []

    def test_unused_follows_file_list_order(self, write_files):
        root = write_files(
            {
                "src/Main.elm": "module Main exposing (main)\n",
                "src/Zeta.elm": "module Zeta exposing (..)\n",
                "src/Alpha.elm": "module Alpha exposing (..)\n",
            }
        )
        project = _application(root)
        unused = find_unused(project)
        assert unused == [p for p in project.file_list if p in unused]
        assert _names(unused) == ["Alpha.elm", "Zeta.elm"]


class TestPackageReachability:
    def test_multiple_roots(self, write_files):
        root = write_files(
            {
                "src/X.elm": "module X exposing (..)\nimport Z\n",
                "src/Y.elm": "module Y exposing (..)\n",
                "src/Z.elm": "module Z exposing (..)\n",
                "src/W.elm": "module W exposing (..)\n",
            }
        )
        result = analyze_reachability(_package(root, ["X", "Y"]))
        assert result.reachable == {"X", "Y", "Z"}
        assert _names(result.unused) == ["W.elm"]

    def test_module_reachable_only_through_second_root(self, write_files):
        """Imports of every exposed module are followed, not just the first."""
        root = write_files(
            {
                "src/X.elm": "module X exposing (..)\n",
                "src/Y.elm": "module Y exposing (..)\nimport Q\n",
                "src/Q.elm": "module Q exposing (..)\n",
                "src/W.elm": "module W exposing (..)\n",
            }
        )
        result = analyze_reachability(_package(root, ["X", "Y"]))
        assert "Q" in result.reachable
        assert _names(result.unused) == ["W.elm"]

    def test_category_with_single_module(self, write_files):
        root = write_files(
            {
                "src/Json/Extra.elm": "module Json.Extra exposing (..)\n",
                "src/Json/Dead.elm": "module Json.Dead exposing (..)\n",
            }
        )
        result = analyze_reachability(_package(root, {"Json": "Json.Extra"}))
        assert result.roots == ("Json.Extra",)
        assert _names(result.unused) == ["Dead.elm"]

    def test_exposed_module_without_file(self, chain_project):
        with pytest.raises(ConfigurationError, match="no source file"):
            analyze_reachability(_package(chain_project, ["Page", "Missing"]))


class TestLoader:
    def test_in_memory_loader(self, chain_project):
        project = _package(chain_project, ["Page"])
        sources = {
            path: f"module {path.rsplit('/', 1)[-1][:-4]} exposing (..)\n"
            for path in project.file_list
        }

        def loader(path):
            return Module.from_source(path, sources[path])

        result = analyze_reachability(project, loader=loader)
        # Nothing imports anything in memory, so only the root survives
        assert result.reachable == {"Page"}
        assert _names(result.unused) == ["Main.elm", "Orphan.elm", "Widget.elm"]

    def test_loader_error_aborts_run(self, chain_project):
        project = _application(chain_project)

        def loader(path):
            raise FileAccessError(path, "permission denied")

        with pytest.raises(FileAccessError):
            analyze_reachability(project, loader=loader)

    def test_runs_are_independent(self, chain_project):
        project = _application(chain_project)
        first = find_unused(project)
        (chain_project / "src" / "Orphan.elm").write_text("module Orphan exposing (x)\nimport Main\n")
        assert find_unused(project) == first
        (chain_project / "src" / "Main.elm").write_text(
            "module Main exposing (main)\nimport Page\nimport Orphan\n"
        )
        assert find_unused(project) == []


@pytest.mark.slow
class TestLargeProject:
    """Thousands of files on disk, parsed and traversed end to end."""

    def test_long_chain_with_dead_branch(self, write_files):
        size = 3000
        files = {
            f"src/Gen/M{i}.elm": f"module Gen.M{i} exposing (..)\nimport Gen.M{i + 1}\nimport Html\n"
            for i in range(size - 1)
        }
        files[f"src/Gen/M{size - 1}.elm"] = f"module Gen.M{size - 1} exposing (..)\n"
        files.update(
            {
                f"src/Dead/D{i}.elm": f"module Dead.D{i} exposing (..)\nimport Gen.M0\n"
                for i in range(size // 10)
            }
        )
        files["src/Main.elm"] = "module Main exposing (main)\nimport Gen.M0\n"
        root = write_files(files)

        result = analyze_reachability(_application(root))
        assert len(result.reachable) == size + 1
        assert len(result.unused) == size // 10
        assert all("/Dead/" in path for path in result.unused)
