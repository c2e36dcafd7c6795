"""
Main application for the Hunger Games simulation.
"""

import logging
import sys

from hunger_games import HungerGames
from reports.report_generator import ReportGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(config_file: str = "config.yaml", input_file: str = None) -> None:
    """Main application entry point."""
    try:
        logger.info("Starting the Hunger Games...")
        
        games = HungerGames.from_config_file(config_file)
        logging.getLogger().setLevel(games.config.get('log_level', 'INFO'))
        
        input_file = input_file or games.config.get('input_file')
        logger.info(f"Setting up Panem from {input_file}")
        games.setup_panem(input_file)
        logger.info(f"{len(games.get_districts())} districts staged")
        
        result = games.run()
        logger.info(f"{len(result.duels)} duels fought")
        logger.info(f"Surviving districts: {result.surviving_districts}")
        
        report_generator = ReportGenerator()
        report_results = report_generator.generate_all_reports(
            result.duels, games.registry, games.config.get('report_dir', 'reports'))
        logger.info(f"Generated reports: {report_results}")
        
        if result.winner is not None:
            print(f"Winner: district {result.winner.district_id}")
        else:
            print("No single winning district")
        
    except Exception as e:
        logger.error(f"Error in Hunger Games: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    config_file = sys.argv[1] if len(sys.argv) > 1 else "config.yaml"
    input_file = sys.argv[2] if len(sys.argv) > 2 else None
    main(config_file, input_file)
