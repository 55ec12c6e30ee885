import time
import logging
import signal
import argparse

from core.config_loader import load_config
from core.campaign.manager import CampaignManager
from database.init_db import init_db
from database.uow import scout_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Global flag for graceful shutdown
running = True

def signal_handler(sig, frame):
    global running
    logger.info("Shutdown signal received")
    running = False

signal.signal(signal.SIGINT, signal_handler)
signal.signal(signal.SIGTERM, signal_handler)


def run_expiry_sweep(config) -> int:
    """Expire stale scout invitations in one transaction."""
    with scout_uow(store_config=config.store) as uow:
        manager = CampaignManager(uow.invitations, uow.candidates, config=config.campaign)
        return manager.expire_stale()


def main():
    parser = argparse.ArgumentParser(description="TechScout maintenance driver")
    parser.add_argument('--mode', type=str, choices=['init-db', 'expire'], default='expire',
                      help='init-db: create tables; expire: expire stale invitations (default)')
    parser.add_argument('--interval', type=int, default=0,
                      help='Repeat the expiry sweep every N seconds (0 = run once)')
    args = parser.parse_args()

    # Initialize DB (with retry logic)
    init_db()
    if args.mode == 'init-db':
        return

    config = load_config()
    logger.info(f"Expiring invitations older than {config.campaign.expiry_days} days")

    while running:
        cycle_start = time.time()
        try:
            expired = run_expiry_sweep(config)
            logger.info(f"Expiry sweep finished in {time.time() - cycle_start:.2f}s: {expired} expired")
        except Exception as e:
            logger.error(f"Error in expiry sweep: {e}", exc_info=True)

        if args.interval <= 0:
            break
        # Sleep in chunks to allow responsive shutdown
        for _ in range(max(args.interval // 5, 1)):
            if not running: break
            time.sleep(5)

if __name__ == "__main__":
    main()
