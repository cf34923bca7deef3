import json

import pytest

import wallet_cli
from wallet_cli import build_parser, run


class TestRun:
    @pytest.mark.asyncio
    async def test_write_read_list(self, wallet, capsys):
        assert await run(wallet, "write", ["Batman", "'I", "am", "vengeance'"]) == 0
        assert await run(wallet, "write", ["Alfred", "butler"]) == 0
        assert await run(wallet, "read", ["Batman"]) == 0
        assert await run(wallet, "list", []) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["Written: Batman", "Written: Alfred", "I am vengeance", "Alfred", "Batman"]

    @pytest.mark.asyncio
    async def test_write_file_stores_bytes(self, wallet, tmp_path, capsysbinary):
        blob = tmp_path / "card.zip"
        blob.write_bytes(b"PK\x03\x04\xff\x00")
        assert await run(wallet, "write", ["card"], file=str(blob)) == 0
        assert await wallet.get("card") == b"PK\x03\x04\xff\x00"

        capsysbinary.readouterr()
        assert await run(wallet, "read", ["card"]) == 0
        assert capsysbinary.readouterr().out == b"PK\x03\x04\xff\x00"

    @pytest.mark.asyncio
    async def test_read_missing(self, wallet, capsys):
        assert await run(wallet, "read", ["nope"]) == 1
        assert "Key not found: nope" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_delete(self, wallet, capsys):
        await wallet.put("gone", "soon")
        assert await run(wallet, "delete", ["gone"]) == 0
        assert await wallet.contains("gone") is False
        assert await run(wallet, "delete", ["gone"]) == 1
        assert "Key not found: gone" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_dump(self, wallet, capsys):
        await wallet.put("text", "abc")
        await wallet.put("bin", b"\x01\x02")
        assert await run(wallet, "dump", []) == 0
        assert json.loads(capsys.readouterr().out) == {
            "bin": {"base64": "AQI="},
            "text": "abc",
        }

    @pytest.mark.asyncio
    async def test_usage_errors(self, wallet, capsys):
        assert await run(wallet, "write", ["only-name"]) == 1
        assert await run(wallet, "read", []) == 1
        assert await run(wallet, "delete", []) == 1
        assert "Usage:" in capsys.readouterr().err


class TestMain:
    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            wallet_cli.main([])
        assert exc.value.code == 0
        assert "Wallet CLI" in capsys.readouterr().out

    def test_config_error_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            wallet_cli.main(["--uri", "mongodb://localhost:27017/w", "list"])
        assert exc.value.code == 1
        assert "Need a namePrefix in options" in capsys.readouterr().err

    def test_parser_flags(self):
        parsed = build_parser().parse_args(
            ["--uri", "mongodb://h/db", "--collection", "c", "--prefix", "p", "read", "k"]
        )
        assert (parsed.uri, parsed.collection, parsed.prefix) == ("mongodb://h/db", "c", "p")
        assert parsed.command == "read"
        assert parsed.args == ["k"]
