from engabra.version import project_version, source_identity


def test_project_version_value():
    assert project_version() == "0.2.1"


def test_project_version_is_dotted_numbers():
    assert all(part.isdigit() for part in project_version().split("."))


def test_source_identity_without_build_information(monkeypatch):
    monkeypatch.delenv("ENGABRA_SOURCE_IDENTITY", raising=False)
    assert source_identity() == "NoSourceCodeIdentity_CantRunGitDescribe_!!"


def test_source_identity_blank_value_uses_marker(monkeypatch):
    monkeypatch.setenv("ENGABRA_SOURCE_IDENTITY", "   ")
    assert source_identity() == "NoSourceCodeIdentity_CantRunGitDescribe_!!"


def test_source_identity_from_environment(monkeypatch):
    monkeypatch.setenv("ENGABRA_SOURCE_IDENTITY", "v0.2.1-4-gabcdef0")
    assert source_identity() == "v0.2.1-4-gabcdef0"