import pytest

from srcmgr.errors import NotADirectory
from srcmgr.settings import Settings
from srcmgr.store import Store

from .base import install_directly
from .driver import TestDriver


@pytest.fixture(name="store")
def fixture_store(settings: Settings, driver: TestDriver) -> Store:
    return Store(settings=settings, driver=driver)


def populate(settings: Settings) -> None:
    install_directly(settings, settings.debuginfo_root, "foo-debuginfo-1.0")
    install_directly(settings, settings.debuginfo_root, "bar-debuginfo-2.0")
    install_directly(settings, settings.srpm_root, "foo-1.0")
    (settings.srpm_root / "foo-stray-file").write_text("not a package")


class TestSelect:
    @pytest.mark.trio
    async def test_empty_store(self, store: Store):
        assert await store.select("*") == []

    @pytest.mark.trio
    async def test_everything(self, store: Store, settings: Settings):
        populate(settings)
        assert sorted(await store.select("*")) == sorted(
            [
                settings.debuginfo_root / "foo-debuginfo-1.0",
                settings.debuginfo_root / "bar-debuginfo-2.0",
                settings.srpm_root / "foo-1.0",
            ]
        )

    @pytest.mark.trio
    @pytest.mark.parametrize("pattern", [None, ""])
    async def test_empty_pattern_selects_nothing(
        self, store: Store, settings: Settings, pattern
    ):
        populate(settings)
        assert await store.select(pattern) == []

    @pytest.mark.trio
    async def test_debuginfo_first(self, store: Store, settings: Settings):
        populate(settings)
        assert await store.select("foo*") == [
            settings.debuginfo_root / "foo-debuginfo-1.0",
            settings.srpm_root / "foo-1.0",
        ]

    @pytest.mark.trio
    async def test_files_invisible(self, store: Store, settings: Settings):
        populate(settings)
        assert await store.select("foo-stray*") == []

    @pytest.mark.trio
    async def test_exact_name(self, store: Store, settings: Settings):
        populate(settings)
        assert await store.select("foo-1.0") == [settings.srpm_root / "foo-1.0"]
        assert await store.select("foo") == []

    @pytest.mark.trio
    async def test_symlinked_directory(
        self, store: Store, settings: Settings, tmp_path
    ):
        populate(settings)
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        (settings.srpm_root / "linked-1.0").symlink_to(elsewhere)
        (settings.srpm_root / "dangling-1.0").symlink_to(tmp_path / "nonexistent")

        result = await store.select("*-1.0")
        assert result[0] == settings.debuginfo_root / "foo-debuginfo-1.0"
        assert sorted(result[1:]) == [
            settings.srpm_root / "foo-1.0",
            settings.srpm_root / "linked-1.0",
        ]

    @pytest.mark.trio
    async def test_select_in_missing_root(self, store: Store, settings: Settings):
        assert await store.select_in(settings.srpm_root, "*") == []


class TestEnsureRoot:
    @pytest.mark.trio
    async def test_create(self, store: Store, settings: Settings):
        await store.ensure_root(settings.debuginfo_root)
        assert settings.debuginfo_root.is_dir()

    @pytest.mark.trio
    async def test_existing(self, store: Store, settings: Settings):
        settings.srpm_root.mkdir()
        (settings.srpm_root / "foo-1.0").mkdir()
        await store.ensure_root(settings.srpm_root)
        assert (settings.srpm_root / "foo-1.0").is_dir()

    @pytest.mark.trio
    async def test_not_a_directory(self, store: Store, settings: Settings):
        settings.srpm_root.write_text("")
        with pytest.raises(NotADirectory, match="exists, but it is not directory"):
            await store.ensure_root(settings.srpm_root)


class TestBrokenEntries:
    @pytest.mark.trio
    async def test_symlink_loop(self, store: Store, settings: Settings):
        populate(settings)
        (settings.srpm_root / "loop").symlink_to(settings.srpm_root / "loop")

        assert sorted(await store.select("*")) == sorted(
            [
                settings.debuginfo_root / "foo-debuginfo-1.0",
                settings.debuginfo_root / "bar-debuginfo-2.0",
                settings.srpm_root / "foo-1.0",
            ]
        )

    @pytest.mark.trio
    async def test_symlinked_root(self, store: Store, settings: Settings, tmp_path):
        real_root = tmp_path / "srpm-elsewhere"
        (real_root / "foo-1.0").mkdir(parents=True)
        settings.srpm_root.symlink_to(real_root)

        assert await store.select("foo*") == [settings.srpm_root / "foo-1.0"]
