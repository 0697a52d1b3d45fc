"""
Tests for the Quagga OSPF interface endpoints.
"""
import pytest
from unittest.mock import Mock, call

from opnsense_lib.api import (
    ApiClient,
    ApiError,
    NotFoundError,
    OSPFInterface,
    QuaggaClient,
    SelectedMap,
)


@pytest.fixture
def api():
    return Mock(spec=ApiClient)


@pytest.fixture
def client(api):
    return QuaggaClient(api)


@pytest.fixture
def ospf_interface():
    return OSPFInterface(
        enabled="1",
        interfacename=SelectedMap("lan"),
        authkey="-1",
        authkey_id="5",
        area="0.0.0.0",
        cost="40",
        cost_demoted="65535",
    )


class TestSelectedMap:
    def test_plain_string(self):
        assert SelectedMap.from_api("lan") == SelectedMap("lan")

    def test_option_dict(self):
        selected = SelectedMap.from_api({
            "lan": {"value": "LAN", "selected": 0},
            "opt1": {"value": "DMZ", "selected": "1"},
        })
        assert selected.value == "opt1"
        assert selected.choices == {"lan": "LAN", "opt1": "DMZ"}
        assert selected.to_api() == "opt1"

    def test_nothing_selected(self):
        assert SelectedMap.from_api({"lan": {"value": "LAN", "selected": 0}}).value == ""

    def test_empty_values(self):
        assert SelectedMap.from_api(None).value == ""
        assert SelectedMap.from_api([]).value == ""

    def test_multiple_selected(self):
        selected = SelectedMap.from_api({
            "a": {"value": "A", "selected": 1},
            "b": {"value": "B", "selected": 1},
        })
        assert selected.value == "a,b"


class TestGet:
    def test_get(self, client, api):
        api.get.return_value = {"interface": {
            "enabled": "1",
            "interfacename": {"lan": {"value": "LAN", "selected": 1}},
            "authkey_id": "5",
            "cost": "40",
            "carp_depend_on": {"": {"value": "None", "selected": 1}},
        }}

        iface = client.get_ospf_interface("abc-123")

        api.get.assert_called_once_with("quagga/ospfsettings/getInterface/abc-123")
        assert iface.enabled == "1"
        assert iface.interfacename.value == "lan"
        assert iface.authkey_id == "5"
        assert iface.hellointerval == ""

    @pytest.mark.parametrize("response", [[], {}, {"interface": []}, {"interface": {}}])
    def test_unknown_id(self, client, api, response):
        api.get.return_value = response
        with pytest.raises(NotFoundError):
            client.get_ospf_interface("missing")

    def test_requires_id(self, client, api):
        with pytest.raises(ApiError):
            client.get_ospf_interface("")
        api.get.assert_not_called()


class TestAdd:
    def test_add_then_reconfigure(self, client, api, ospf_interface):
        api.post.side_effect = [{"result": "saved", "uuid": "abc-123"}, {"status": "ok"}]

        assert client.add_ospf_interface(ospf_interface) == "abc-123"

        assert api.post.call_args_list == [
            call("quagga/ospfsettings/addInterface", {"interface": ospf_interface.to_api()}),
            call("quagga/service/reconfigure"),
        ]
        body = api.post.call_args_list[0].args[1]["interface"]
        assert body["interfacename"] == "lan"
        assert "id" not in body

    def test_validation_failure(self, client, api, ospf_interface):
        api.post.return_value = {
            "result": "failed",
            "validations": {"interface.authkey_id": "Value must be between 1 and 255."},
        }

        with pytest.raises(ApiError) as exc_info:
            client.add_ospf_interface(ospf_interface)

        assert exc_info.value.validations == {"interface.authkey_id": "Value must be between 1 and 255."}
        assert "interface.authkey_id" in str(exc_info.value)
        assert api.post.call_count == 1

    def test_missing_uuid(self, client, api, ospf_interface):
        api.post.return_value = {"result": "saved"}
        with pytest.raises(ApiError):
            client.add_ospf_interface(ospf_interface)


class TestUpdate:
    def test_update(self, client, api, ospf_interface):
        api.post.side_effect = [{"result": "saved"}, {"status": "OK"}]

        client.update_ospf_interface("abc-123", ospf_interface)

        assert api.post.call_args_list[0] == call(
            "quagga/ospfsettings/setInterface/abc-123", {"interface": ospf_interface.to_api()}
        )

    def test_reconfigure_failure(self, client, api, ospf_interface):
        api.post.side_effect = [{"result": "saved"}, {"status": "failed"}]
        with pytest.raises(ApiError):
            client.update_ospf_interface("abc-123", ospf_interface)


class TestDelete:
    def test_delete(self, client, api):
        api.post.side_effect = [{"result": "deleted"}, {"status": "ok"}]

        client.delete_ospf_interface("abc-123")

        assert api.post.call_args_list[0] == call("quagga/ospfsettings/delInterface/abc-123")

    def test_not_found(self, client, api):
        api.post.return_value = {"result": "not found"}
        with pytest.raises(NotFoundError):
            client.delete_ospf_interface("abc-123")

    def test_failure(self, client, api):
        api.post.return_value = {"result": "failed"}
        with pytest.raises(ApiError):
            client.delete_ospf_interface("abc-123")
