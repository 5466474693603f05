"""Tests for the ``mas-seed`` command line."""

import logging

import pytest

from mas_seed.cli import build_parser, main


@pytest.fixture
def factory(store):
    created: list = []

    def _factory(settings):
        created.append(store)
        return store

    _factory.created = created
    return _factory


def _no_prompt(message: str) -> str:
    raise AssertionError(f"unexpected prompt: {message}")


class TestSeedCommand:

    def test_seed_core(self, store, settings, factory, capsys) -> None:
        code = main(["--modules", "core"], store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 0
        assert sum(len(store.docs(c)) for c in ("organizations", "settings", "departments", "roles")) == 18
        assert store.closed
        out = capsys.readouterr().out
        assert "SEEDING COMPLETE" in out
        assert "Total records : 18" in out

    def test_hr_dry_run(self, store, settings, factory, capsys) -> None:
        code = main(["--modules=hr", "--dry-run"], store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 0
        assert store.calls == []
        out = capsys.readouterr().out
        assert "Total records : 29" in out
        assert "would seed" in out

    def test_invalid_module_exits_1(self, store, settings, factory, capsys) -> None:
        code = main(["--modules=doesnotexist"], store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 1
        assert store.mutations == []
        assert "No valid modules specified" in capsys.readouterr().out

    def test_missing_project_id_exits_1(self, make_settings, factory, capsys) -> None:
        code = main([], store_factory=factory, settings=make_settings(PROJECT_ID=None), prompt=_no_prompt)
        assert code == 1
        assert factory.created == []
        assert "PROJECT_ID" in capsys.readouterr().out

    def test_store_failure_exits_1(self, store, settings, factory) -> None:
        store.fail_on.add("roles")
        code = main(["-m", "core"], store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 1
        assert store.closed

    def test_organization_option(self, store, settings, factory) -> None:
        code = main(["-m", "core", "-o", "tenant-7"], store_factory=factory, settings=settings,
                    prompt=_no_prompt)
        assert code == 0
        assert store.docs("roles")["role-admin"]["organizationId"] == "tenant-7"

    @pytest.mark.parametrize("argv", [["bogus"], ["--modules"], ["--unknown-flag"]])
    def test_usage_errors_exit_1(self, argv, store, settings, factory) -> None:
        code = main(argv, store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 1
        assert factory.created == []
        assert store.calls == []

    def test_help_exits_0(self, settings, factory, capsys) -> None:
        assert main(["--help"], store_factory=factory, settings=settings, prompt=_no_prompt) == 0
        assert "mas-seed" in capsys.readouterr().out

    def test_verbose_lowers_log_level_to_debug(self, store, settings, factory, caplog) -> None:
        root = logging.getLogger()
        original = root.level
        try:
            code = main(["-m", "users", "-d", "-v"], store_factory=factory, settings=settings,
                        prompt=_no_prompt)
            assert code == 0
            assert root.level == logging.DEBUG
            assert any(
                r.levelno == logging.DEBUG and "assumes existing data in" in r.getMessage()
                for r in caplog.records
            )
        finally:
            root.setLevel(original)


class TestProductionPrompt:

    def test_declined_exits_0_without_writes(self, store, make_settings, factory, capsys) -> None:
        settings = make_settings(ENVIRONMENT="production")
        code = main(["-m", "core", "--reset"], store_factory=factory, settings=settings, prompt=lambda _: "n")
        assert code == 0
        assert store.calls == []
        assert "cancelled" in capsys.readouterr().out

    def test_end_of_input_declines(self, store, make_settings, factory) -> None:
        def eof(message: str) -> str:
            raise EOFError

        code = main(["-m", "core"], store_factory=factory, settings=make_settings(ENVIRONMENT="production"),
                    prompt=eof)
        assert code == 0
        assert store.calls == []

    def test_accepted_seeds(self, store, make_settings, factory) -> None:
        code = main(["-m", "core"], store_factory=factory, settings=make_settings(ENVIRONMENT="production"),
                    prompt=lambda _: "yes")
        assert code == 0
        assert len(store.docs("roles")) == 10

    def test_force_skips_prompt(self, store, make_settings, factory) -> None:
        code = main(["-m", "core", "--force"], store_factory=factory,
                    settings=make_settings(ENVIRONMENT="production"), prompt=_no_prompt)
        assert code == 0
        assert len(store.docs("roles")) == 10


class TestSubcommands:

    def test_list(self, settings, factory, capsys) -> None:
        code = main(["list"], store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 0
        assert factory.created == []
        out = capsys.readouterr().out
        for name in ("core", "users", "accounts", "projects", "finance",
                     "products", "support", "lms", "hr", "communication"):
            assert name in out
        assert "onboardingTemplates" in out

    def test_list_without_project_id(self, make_settings, factory) -> None:
        assert main(["list"], store_factory=factory, settings=make_settings(PROJECT_ID=None)) == 0

    def test_status(self, store, settings, factory, capsys) -> None:
        store.preload("departments", 6)
        code = main(["status"], store_factory=factory, settings=settings, prompt=_no_prompt)
        assert code == 0
        out = capsys.readouterr().out
        assert "6 documents" in out
        assert "empty" in out
        assert store.closed


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.command == "seed"
    assert args.modules is None
    assert not (args.reset or args.dry_run or args.verbose or args.force)
