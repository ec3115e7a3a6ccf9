"""Read-only access to a hardhat project's deployments and build artifacts.

Deployment records live at ``<deployments_dir>/<network>/<ContractName>.json``
and hold at least the deployed ``address``; hardhat-deploy also stores the
``abi`` there. Compiled artifacts live at
``<artifacts_dir>/contracts/<ContractName>.sol/<ContractName>.json``.
"""

from __future__ import annotations

import json
import os

from web3 import Web3


class DeploymentNotFoundError(LookupError):
    pass


class ArtifactNotFoundError(LookupError):
    pass


def _deployment_path(name: str, config: dict) -> str:
    return os.path.join(config["deployments_dir"], config["network"], f"{name}.json")


def _artifact_path(name: str, config: dict) -> str:
    return os.path.join(config["artifacts_dir"], "contracts", f"{name}.sol", f"{name}.json")


def get_deployment(name: str, config: dict) -> dict:
    path = _deployment_path(name, config)
    if not os.path.isfile(path):
        raise DeploymentNotFoundError(f"No deployment found for {name} ({path})")

    with open(path, "r", encoding="utf-8") as record_file:
        record = json.load(record_file)

    if not record.get("address"):
        raise DeploymentNotFoundError(f"Deployment record for {name} has no address ({path})")
    return record


def load_artifact_abi(name: str, config: dict) -> list[dict]:
    path = _artifact_path(name, config)
    if not os.path.isfile(path):
        raise ArtifactNotFoundError(f"No compiled artifact found for {name} ({path})")

    with open(path, "r", encoding="utf-8") as artifact_file:
        artifact = json.load(artifact_file)

    if not artifact.get("abi"):
        raise ArtifactNotFoundError(f"Artifact for {name} has no abi ({path})")
    return artifact["abi"]


def get_contract_at(w3: Web3, name: str, deployment: dict, config: dict):
    # records written without an abi fall back to the compiled artifact
    abi = deployment.get("abi") or load_artifact_abi(name, config)
    return w3.eth.contract(
        address=Web3.to_checksum_address(deployment["address"]),
        abi=abi
    )
