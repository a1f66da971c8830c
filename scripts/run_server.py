import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from martcrowd.common.config import ConfigManager
from martcrowd.forecast.presentation.api import create_app

@hydra.main(version_base=None, config_path="../martcrowd/conf", config_name="config")
def main(cfg: DictConfig):
    cfg = ConfigManager.from_hydra(cfg)
    print("Configuration loaded.")

    app = create_app(cfg)

    server_cfg = cfg.server
    print(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
