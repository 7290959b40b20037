# python
import logging
import sys

from launch_config import get_instance, init_with_path

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) > 1:
        cfg = init_with_path(sys.argv[1])
    else:
        cfg = get_instance()

    print("=== Configuration file contents ===")
    print(cfg.render_summary())

    print("=== Named fields ===")
    print("AppId:", cfg.app_id)
    print("UserName:", cfg.user_name)
    print("Language:", cfg.language)
    print("Offline:", cfg.offline)
    print("DLCName:", cfg.dlc_name)
    print("ApplicationPath:", cfg.application_path)

    print("=== Generic lookup ===")
    print("Signature:", cfg.get("Signature"))

    print("=== All entries ===")
    for key, value in cfg.get_all().items():
        print(f"{key} = {value}")
