import pytest

from .helpers import DEPLOYER_KEY, LOTTERY_ABI, LOTTERY_ADDRESS, write_json


@pytest.fixture
def deployments_dir(tmp_path):
    write_json(tmp_path / "deployments" / "localhost" / "Lottery.json", {"address": LOTTERY_ADDRESS, "abi": LOTTERY_ABI})
    return tmp_path / "deployments"


@pytest.fixture
def artifacts_dir(tmp_path):
    return tmp_path / "artifacts"


@pytest.fixture
def config(deployments_dir, artifacts_dir):
    return {
        "rpc_url": "http://127.0.0.1:8545",
        "private_key": DEPLOYER_KEY,
        "network": "localhost",
        "deployments_dir": str(deployments_dir),
        "artifacts_dir": str(artifacts_dir),
    }


@pytest.fixture
def env(monkeypatch, tmp_path, deployments_dir, artifacts_dir):
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    for name in ("DEPLOYER_PRIVATE_KEY", "HARDHAT_NETWORK", "NETWORK"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RPC_URL", "http://127.0.0.1:8545")
    monkeypatch.setenv("PRIVATE_KEY", DEPLOYER_KEY)
    monkeypatch.setenv("DEPLOYMENTS_DIR", str(deployments_dir))
    monkeypatch.setenv("ARTIFACTS_DIR", str(artifacts_dir))
    return monkeypatch
