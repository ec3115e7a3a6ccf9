from __future__ import annotations

import argparse
import sys
import traceback

from web3 import Web3

from lottery_scripts.accounts import get_named_accounts, get_signer
from lottery_scripts.config import load_config
from lottery_scripts.deployments import get_contract_at, get_deployment


CONTRACT_NAME = "Lottery"
ACTIVITY_ID = 3
BLOCK_HEIGHT = 33530163


def non_negative_int(value: str) -> int:
    height = int(value)
    if height < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return height


def connect(rpc_url: str | None) -> Web3:
    if not rpc_url:
        raise ValueError("Missing env var: RPC_URL")
    return Web3(Web3.HTTPProvider(rpc_url))


def decode_outputs(contract, fn_name: str, result) -> dict:
    """Name the values of a view call using the ABI output (or struct component) names."""
    fn_abi = next(
        (item for item in contract.abi if item.get("type") == "function" and item.get("name") == fn_name),
        None,
    )
    if fn_abi is None:
        raise KeyError(f"{fn_name} not found in ABI")

    outputs = fn_abi.get("outputs", [])
    if len(outputs) == 1 and outputs[0].get("type") == "tuple":
        fields = [c.get("name") for c in outputs[0].get("components", [])]
    else:
        fields = [o.get("name") for o in outputs]
        if len(outputs) == 1:
            result = (result,)
    return dict(zip(fields, result))


def query_counter(w3: Web3, config: dict, activity_id: int, block_height: int) -> int:
    deployer = get_named_accounts(config)["deployer"]
    signer = get_signer(config, deployer)

    deployment = get_deployment(CONTRACT_NAME, config)
    lottery = get_contract_at(w3, CONTRACT_NAME, deployment, config)

    result = lottery.functions.getActivityInfo(activity_id).call(
        {"from": signer.address},
        block_identifier=block_height,
    )
    info = decode_outputs(lottery, "getActivityInfo", result)
    return info["counter"]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read a Lottery activity counter at a past block")
    parser.add_argument("--activity-id", type=int, default=ACTIVITY_ID, help="Activity id passed to getActivityInfo")
    parser.add_argument("--block", type=non_negative_int, default=BLOCK_HEIGHT, help="Block height to evaluate the call at")
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # keep the exit status to 0 or 1 for --help and usage errors
        return 0 if e.code == 0 else 1

    try:
        config = load_config()
        w3 = connect(config["rpc_url"])
        counter = query_counter(w3, config, args.activity_id, args.block)
        print(f"counter at block {args.block}: {counter}")
    except Exception:
        traceback.print_exc()
        return 1

    print("main: exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())
