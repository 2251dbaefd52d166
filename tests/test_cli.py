import socket

from dhkeyxc.cli import main


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_help_exits_with_failure(capsys):
    assert main(["--help"]) == 1
    assert "MIN SERVER USAGE" in capsys.readouterr().out


def test_short_help_flag(capsys):
    assert main(["-h"]) == 1
    assert "MIN CLIENT USAGE" in capsys.readouterr().out


def test_neither_client_nor_server(capsys):
    assert main([]) == 1
    assert "neither client nor server" in capsys.readouterr().err


def test_both_client_and_server(capsys):
    assert main(["-sc"]) == 1
    assert "both client and server" in capsys.readouterr().err


def test_client_with_no_server_fails(capsys):
    port = _free_port()
    assert main(["-c", "--ip", "127.0.0.1", "--port", str(port)]) == 1
    assert "Could not connect to server." in capsys.readouterr().err