from dotenv import find_dotenv, load_dotenv
import os


DEFAULT_NETWORK = "localhost"


def load_config():
    """Read the probe settings from the environment (and .env, if present)."""
    load_dotenv(find_dotenv(usecwd=True))
    return {
        "rpc_url": os.getenv("RPC_URL"),
        "private_key": os.getenv("DEPLOYER_PRIVATE_KEY") or os.getenv("PRIVATE_KEY"),
        "network": os.getenv("HARDHAT_NETWORK") or os.getenv("NETWORK", DEFAULT_NETWORK),
        "deployments_dir": os.getenv("DEPLOYMENTS_DIR") or os.path.join(os.getcwd(), "deployments"),
        "artifacts_dir": os.getenv("ARTIFACTS_DIR") or os.path.join(os.getcwd(), "artifacts"),
    }
