"""Shared test fixtures.

The default graph holds one device, one node and one client with a few
properties observed; tests link them or add a media class as needed.
"""

import pytest

from audio_names.state.registry import ObjectRegistry
from audio_names.state.types import Client, Device, Node

DEVICE_ID = 0
NODE_ID = 1
CLIENT_ID = 2


@pytest.fixture
def registry() -> ObjectRegistry:
    """Registry with an unlinked device, node and client."""
    registry = ObjectRegistry()
    registry.register(Device(id=DEVICE_ID, name="Device name", nick="Device nick"))
    registry.register(Node(id=NODE_ID, name="Node name", nick="Node nick"))
    registry.register(Client(id=CLIENT_ID, application_name="Client name"))
    return registry


@pytest.fixture
def device(registry: ObjectRegistry) -> Device:
    return registry.get(DEVICE_ID)


@pytest.fixture
def node(registry: ObjectRegistry) -> Node:
    return registry.get(NODE_ID)


@pytest.fixture
def client(registry: ObjectRegistry) -> Client:
    return registry.get(CLIENT_ID)


@pytest.fixture
def sink_node(registry: ObjectRegistry, node: Node) -> Node:
    """The fixture node classified as an endpoint."""
    registry.update(NODE_ID, media_class="Audio/Sink")
    return node


@pytest.fixture
def snapshot_yaml(tmp_path):
    """A snapshot file with a sink on a card and a browser stream."""
    path = tmp_path / "snapshot.yaml"
    path.write_text(
        """
devices:
  - id: 40
    name: alsa_card.pci-0000_00_1f.3
    nick: HDA Intel PCH
    description: Built-in Audio
nodes:
  - id: 51
    name: alsa_output.pci-0000_00_1f.3.analog-stereo
    description: Built-in Audio Analog Stereo
    media_class: Audio/Sink
    device_id: 40
  - id: 88
    name: Firefox
    media_name: AudioStream
    media_class: Stream/Output/Audio
    client_id: 70
  - id: 90
    media_class: Stream/Input/Audio
clients:
  - id: 70
    application_name: Firefox
    application_process_binary: firefox
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_yaml(tmp_path):
    """A config file with one stream override."""
    path = tmp_path / "config.yaml"
    path.write_text(
        """
names:
  endpoint:
    - "{device:device.nick}"
  overrides:
    - types: [stream]
      property: "node:node.name"
      value: Firefox
      templates:
        - "{client:application.name} ({client:application.process.binary})"
logging:
  level: WARNING
""",
        encoding="utf-8",
    )
    return path
