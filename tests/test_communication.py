from rtype_engine.communication import Communication
from rtype_engine.protocol import (
    HEADER_SIZE,
    EntityIdData,
    Header,
    PacketType,
    pack_payload,
    unpack_header,
    unpack_payload,
)


class Recorder(Communication):
    def __init__(self):
        super().__init__()
        self.received = []

    def handle_data(self, header, body, port):
        self.received.append((header, body, port))


def _message(comm, magic=None):
    body = pack_payload(EntityIdData(id=12))
    header = Header(packet_type=PacketType.DESTROY, payload_size=len(body))
    if magic is not None:
        header.magic_number = magic
    return comm.build_message(header, body), body


def test_build_message_prefixes_header():
    comm = Recorder()
    raw, body = _message(comm)
    assert raw[HEADER_SIZE:] == body
    assert unpack_header(raw).payload_size == len(body)


def test_valid_packet_is_dispatched():
    comm = Recorder()
    raw, body = _message(comm)
    assert comm.handle_receive(raw, ("127.0.0.1", 4242))
    header, received_body, port = comm.received[0]
    assert header.packet_type == PacketType.DESTROY
    assert unpack_payload(EntityIdData, received_body) == EntityIdData(id=12)
    assert port == 4242


def test_bad_magic_is_dropped_but_client_recorded():
    comm = Recorder()
    raw, _ = _message(comm, magic=1)
    assert not comm.handle_receive(raw, ("127.0.0.1", 5000))
    assert comm.received == []
    assert comm.clients == {5000: ("127.0.0.1", 5000)}


def test_truncated_datagram_is_dropped():
    comm = Recorder()
    raw, _ = _message(comm)
    assert comm.handle_receive(raw[: HEADER_SIZE - 1], ("127.0.0.1", 5001)) is False
    assert comm.received == []


def test_first_address_per_port_is_kept():
    comm = Recorder()
    raw, _ = _message(comm)
    comm.handle_receive(raw, ("10.0.0.1", 6000))
    comm.handle_receive(raw, ("10.0.0.2", 6000))
    assert comm.clients[6000] == ("10.0.0.1", 6000)
    assert len(comm.received) == 2