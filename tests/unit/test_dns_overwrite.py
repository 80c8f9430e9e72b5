import pytest

from mxdirectory.dns.overwrite import ClientDnsOverwrite


def test_unmapped_host_passes_through():
    dns = ClientDnsOverwrite({"other.org": "http://localhost:8008"})

    url = dns.transform("https://matrix.example.org/_matrix/client/r0/user_directory/search")

    assert str(url) == "https://matrix.example.org/_matrix/client/r0/user_directory/search"


def test_mapped_host_swaps_scheme_host_and_port():
    dns = ClientDnsOverwrite({"Matrix.Example.org": "http://10.0.0.5:8008"})

    url = dns.transform("https://matrix.example.org/_matrix/client/r0/user_directory/search?x=1")

    assert url.scheme == "http"
    assert url.host == "10.0.0.5"
    assert url.port == 8008
    assert url.path == "/_matrix/client/r0/user_directory/search"
    assert url.params["x"] == "1"


def test_replacement_without_port_drops_original_port():
    dns = ClientDnsOverwrite({"matrix.example.org": "https://synapse.internal"})

    url = dns.transform("https://matrix.example.org:8448/search")

    assert url.host == "synapse.internal"
    assert url.port is None


@pytest.mark.parametrize("bad", ["localhost:8008", "ftp://files.example.org", "not a url"])
def test_invalid_replacement_is_rejected(bad):
    with pytest.raises(ValueError):
        ClientDnsOverwrite({"matrix.example.org": bad})
