from sysfetch.packages import (
    NO_PACKAGES,
    PACKAGE_MANAGERS,
    PackageManager,
    collect_package_counts,
    count_packages,
    get_package_count,
)


def test_no_managers_found(dummy_sys):
    assert get_package_count(dummy_sys(os_name="linux")) == NO_PACKAGES


def test_no_managers_found_windows(dummy_sys):
    assert get_package_count(dummy_sys(os_name="windows")) == NO_PACKAGES


def test_single_manager(dummy_sys):
    sysu = dummy_sys(commands={"dpkg"}, outputs={"dpkg-query -f '.\\n' -W": ".\n.\n.\n"})
    assert get_package_count(sysu) == "3 (dpkg)"


def test_multiple_managers_sum_in_table_order(dummy_sys):
    sysu = dummy_sys(commands={"rpm", "pacman", "snap"}, outputs={
        "pacman -Qq --color never": "base\nlinux\nvim\n",
        "rpm -qa": "rpm-4.19\n",
        "snap list": "Name  Version  Rev\ncore22  20240111  1122\nfirefox  130.0  4848\n",
    })
    assert get_package_count(sysu) == "6 (pacman, rpm, snap)"


def test_available_manager_without_packages_is_omitted(dummy_sys):
    sysu = dummy_sys(commands={"dpkg", "flatpak"}, outputs={"dpkg-query -f '.\\n' -W": ".\n"})
    assert get_package_count(sysu) == "1 (dpkg)"


def test_windows_managers_skipped_on_posix(dummy_sys):
    sysu = dummy_sys(os_name="linux", commands={"choco", "scoop"})
    assert collect_package_counts(sysu) == []


def test_posix_managers_skipped_on_windows(dummy_sys):
    sysu = dummy_sys(os_name="windows", commands={"dpkg"}, outputs={"dpkg-query -f '.\\n' -W": ".\n"})
    assert get_package_count(sysu) == NO_PACKAGES
    assert sysu.calls == []


def test_choco_and_scoop_count_directories(tmp_path, monkeypatch, dummy_sys):
    choco = tmp_path / "chocolatey"
    for name in ("git", "7zip", "nodejs"):
        (choco / "lib" / name).mkdir(parents=True)
    scoop = tmp_path / "scoop"
    for name in ("scoop", "ripgrep", "fd"):
        (scoop / "apps" / name).mkdir(parents=True)
    monkeypatch.setenv("ChocolateyInstall", str(choco))
    monkeypatch.setenv("SCOOP", str(scoop))

    sysu = dummy_sys(os_name="windows", commands={"choco", "scoop"})
    assert get_package_count(sysu) == "5 (choco, scoop)"


def test_missing_directory_counts_zero(tmp_path, dummy_sys):
    manager = PackageManager("choco", directory=lambda: str(tmp_path / "missing"), windows=True)
    assert count_packages(manager, dummy_sys(os_name="windows")) == 0


def test_header_never_goes_negative(dummy_sys):
    manager = PackageManager("snap", command="snap list", header_lines=1)
    assert count_packages(manager, dummy_sys()) == 0


def test_table_covers_required_managers():
    names = {m.name for m in PACKAGE_MANAGERS}
    assert {"pacman", "dpkg", "rpm", "choco", "scoop"} <= names
