"""
Report generator for the Hunger Games simulation.
"""

import os
import pandas as pd
import logging
from typing import Dict, List

from models.duel import DuelRecord
from registry.district_registry import DistrictRegistry

logger = logging.getLogger(__name__)

DUEL_COLUMNS = [
    'Round', 'Winner', 'Winner District', 'Winner Month', 'Winner Tessera',
    'Loser', 'Loser District', 'Loser Month', 'Loser Tessera', 'Eliminated Districts'
]
DISTRICT_COLUMNS = [
    'District', 'Odd Population', 'Even Population', 'Odd Tessera', 'Even Tessera'
]
TREE_COLUMNS = ['District', 'Depth', 'Left', 'Right']


class ReportGenerator:
    """Generates CSV reports of a simulation run."""
    
    def generate_duel_report(self, records: List[DuelRecord], output_file: str) -> int:
        """
        Generate one row per fought duel.
        Returns the number of duels in the report.
        """
        data = []
        for record in records:
            data.append({
                'Round': record.round_number,
                'Winner': record.winner.full_name,
                'Winner District': record.winner.district_id,
                'Winner Month': record.winner.birth_month,
                'Winner Tessera': record.winner.tessera,
                'Loser': record.loser.full_name,
                'Loser District': record.loser.district_id,
                'Loser Month': record.loser.birth_month,
                'Loser Tessera': record.loser.tessera,
                'Eliminated Districts': ' '.join(str(d) for d in record.eliminated_districts)
            })
        
        if not data:
            logger.warning("No duels to report")
        
        df = pd.DataFrame(data, columns=DUEL_COLUMNS)
        df.to_csv(output_file, index=False, encoding='utf-8')
        
        logger.info(f"Generated duel report with {len(data)} duels: {output_file}")
        return len(data)
    
    def generate_district_report(self, registry: DistrictRegistry, output_file: str) -> int:
        """Generate one row per district still in the game, in ascending id order."""
        data = []
        for district in registry.inorder():
            data.append({
                'District': district.district_id,
                'Odd Population': len(district.odd_population),
                'Even Population': len(district.even_population),
                'Odd Tessera': sum(1 for p in district.odd_population if p.tessera),
                'Even Tessera': sum(1 for p in district.even_population if p.tessera)
            })
        
        df = pd.DataFrame(data, columns=DISTRICT_COLUMNS)
        df.to_csv(output_file, index=False, encoding='utf-8')
        
        logger.info(f"Generated district report with {len(data)} districts: {output_file}")
        return len(data)
    
    def generate_tree_report(self, registry: DistrictRegistry, output_file: str) -> int:
        """Generate the tree shape in pre-order, one row per node with its depth and children."""
        data = []
        for node, depth in registry.preorder_nodes():
            data.append({
                'District': node.key,
                'Depth': depth,
                'Left': node.left.key if node.left is not None else '',
                'Right': node.right.key if node.right is not None else ''
            })
        
        df = pd.DataFrame(data, columns=TREE_COLUMNS)
        df.to_csv(output_file, index=False, encoding='utf-8')
        
        logger.info(f"Generated tree report with {len(data)} nodes: {output_file}")
        return len(data)
    
    def generate_all_reports(self, records: List[DuelRecord], registry: DistrictRegistry,
                             output_dir: str = "reports") -> Dict[str, int]:
        """Generate every report into a directory. Returns report name -> row count."""
        results = {}
        try:
            os.makedirs(output_dir, exist_ok=True)
            results['duels'] = self.generate_duel_report(
                records, os.path.join(output_dir, "duels.csv"))
            results['districts'] = self.generate_district_report(
                registry, os.path.join(output_dir, "districts.csv"))
            results['tree'] = self.generate_tree_report(
                registry, os.path.join(output_dir, "tree.csv"))
        except OSError as e:
            logger.error(f"Error writing reports to {output_dir}: {e}")
        return results
