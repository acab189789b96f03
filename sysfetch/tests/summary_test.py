from sysfetch import summary
from sysfetch.summary import SystemSummary, collect_summary


def test_collect_summary_runs_each_lookup(monkeypatch, dummy_sys):
    sysu = dummy_sys(os_name="linux")
    seen = []

    monkeypatch.setattr(summary, "resolve_machine_model", lambda s: seen.append(s) or "Framework Laptop 13")
    monkeypatch.setattr(summary, "get_os_pretty_name", lambda: "Fedora Linux 40 (Workstation Edition)")
    monkeypatch.setattr(summary, "get_kernel_version", lambda: "6.10.12-200.fc40.x86_64")
    monkeypatch.setattr(summary, "get_package_count", lambda s: seen.append(s) or "2211 (rpm, flatpak)")

    result = collect_summary(sysu)

    assert result == SystemSummary(
        model="Framework Laptop 13",
        os_name="Fedora Linux 40 (Workstation Edition)",
        kernel="6.10.12-200.fc40.x86_64",
        packages="2211 (rpm, flatpak)",
    )
    assert seen == [sysu, sysu]


def test_summary_as_dict():
    s = SystemSummary(model="m", os_name="o", kernel="k", packages="p")
    assert s.as_dict() == {"model": "m", "os_name": "o", "kernel": "k", "packages": "p"}


def test_collect_summary_only_runs_requested_fields(monkeypatch, dummy_sys):
    def boom(*_args):
        raise AssertionError("unrequested field was computed")

    monkeypatch.setattr(summary, "resolve_machine_model", boom)
    monkeypatch.setattr(summary, "get_os_pretty_name", lambda: "Debian GNU/Linux 12 (bookworm)")
    monkeypatch.setattr(summary, "get_kernel_version", boom)
    monkeypatch.setattr(summary, "get_package_count", lambda s: "1640 (dpkg)")

    result = collect_summary(dummy_sys(), fields=["os_name", "packages"])

    assert result.model is None and result.kernel is None
    assert result.as_dict() == {"os_name": "Debian GNU/Linux 12 (bookworm)", "packages": "1640 (dpkg)"}
