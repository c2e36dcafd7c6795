"""
Loads districts and people into the district registry's staging list.
"""

import logging
import pandas as pd
from typing import Any, Dict, List, Optional, Tuple

from models.district import District
from models.person import Person, TESSERA_MAX_AGE, TESSERA_MIN_AGE
from registry.district_registry import DistrictRegistry

logger = logging.getLogger(__name__)

PERSON_COLUMNS = ['first_name', 'last_name', 'birth_month', 'age', 'district_id', 'effectiveness']


class PanemLoader:
    """Reads the setup input and stages districts with their populations."""
    
    def __init__(self, registry: DistrictRegistry, config: Optional[Dict[str, Any]] = None):
        self.registry = registry
        self.config = config or {}
        self.tessera_min_age = self.config.get('tessera_min_age', TESSERA_MIN_AGE)
        self.tessera_max_age = self.config.get('tessera_max_age', TESSERA_MAX_AGE)
    
    def load(self, filename: str) -> Tuple[int, int]:
        """
        Load districts and people from a whitespace-separated input file.

        Layout: number of districts, the district ids, number of people, then one
        person per line as `first last birth_month age district_id effectiveness`.
        Returns (districts staged, people placed).
        """
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                tokens = f.read().split()
        except OSError as e:
            logger.error(f"Error reading input file {filename}: {e}")
            return 0, 0
        
        districts_staged, position = self._stage_districts(tokens)
        people = self._read_people_frame(tokens, position)
        people_placed = self.load_people(people)
        
        logger.info(f"Loaded {districts_staged} districts and {people_placed} people from {filename}")
        return districts_staged, people_placed
    
    def _stage_districts(self, tokens: List[str]) -> Tuple[int, int]:
        num_districts = self._read_count(tokens, 0, "number of districts")
        if len(tokens) < 1 + num_districts:
            raise ValueError(f"Expected {num_districts} district ids, found {len(tokens) - 1}")
        
        for token in tokens[1:1 + num_districts]:
            try:
                district_id = int(token)
            except ValueError:
                raise ValueError(f"Invalid district id: {token!r}")
            self.registry.stage(District(district_id))
        
        return num_districts, 1 + num_districts
    
    def _read_people_frame(self, tokens: List[str], position: int) -> pd.DataFrame:
        num_people = self._read_count(tokens, position, "number of people")
        person_tokens = tokens[position + 1:]
        
        width = len(PERSON_COLUMNS)
        available = len(person_tokens) // width
        if available < num_people:
            logger.warning(f"Input announces {num_people} people but only {available} complete rows follow")
        
        rows = [person_tokens[i * width:(i + 1) * width] for i in range(min(num_people, available))]
        return pd.DataFrame(rows, columns=PERSON_COLUMNS)
    
    @staticmethod
    def _read_count(tokens: List[str], position: int, what: str) -> int:
        if position >= len(tokens):
            raise ValueError(f"Input ended before the {what}")
        try:
            count = int(tokens[position])
        except ValueError:
            raise ValueError(f"Invalid {what}: {tokens[position]!r}")
        if count < 0:
            raise ValueError(f"Negative {what}: {count}")
        return count
    
    def load_people_from_csv(self, csv_file: str) -> int:
        """
        Load people from a CSV file with a header row naming the person columns.
        Returns the number of people placed in staged districts.
        """
        try:
            df = pd.read_csv(csv_file, dtype=str)
            logger.info(f"Loaded CSV with {len(df)} rows")
        except Exception as e:
            logger.error(f"Error loading CSV file: {e}")
            return 0
        
        missing = [column for column in PERSON_COLUMNS if column not in df.columns]
        if missing:
            logger.error(f"CSV file {csv_file} is missing columns: {', '.join(missing)}")
            return 0
        
        return self.load_people(df)
    
    def load_people(self, people: pd.DataFrame) -> int:
        """Place every valid person row into its staged district. Returns the number placed."""
        # A repeated id keeps its people in the first staged district
        districts: Dict[int, District] = {}
        for district in self.registry.staged:
            districts.setdefault(district.district_id, district)
        
        people_placed = 0
        for index, row in people.iterrows():
            person = self._process_person_row(row)
            if person is None:
                continue
            
            district = districts.get(person.district_id)
            if district is None:
                logger.warning(f"Skipping {person.full_name}: no staged district {person.district_id}")
                continue
            
            district.add_person(person)
            people_placed += 1
        
        return people_placed
    
    def _process_person_row(self, row: pd.Series) -> Optional[Person]:
        """Turn one input row into a Person, or None if the row is malformed."""
        first_name = row.get('first_name', '')
        last_name = row.get('last_name', '')
        
        if pd.isna(first_name) or pd.isna(last_name):
            logger.warning(f"Skipping person row with missing name: {row.to_dict()}")
            return None
        
        try:
            birth_month = int(row.get('birth_month'))
            age = int(row.get('age'))
            district_id = int(row.get('district_id'))
            effectiveness = int(row.get('effectiveness'))
        except (ValueError, TypeError):
            logger.warning(f"Skipping person row with non-integer fields: {row.to_dict()}")
            return None
        
        if not 1 <= birth_month <= 12:
            logger.warning(f"Skipping {first_name} {last_name}: birth month {birth_month} out of range")
            return None
        if age < 0:
            logger.warning(f"Skipping {first_name} {last_name}: negative age {age}")
            return None
        
        return Person.create(
            first_name=str(first_name),
            last_name=str(last_name),
            birth_month=birth_month,
            age=age,
            district_id=district_id,
            effectiveness=effectiveness,
            tessera_min_age=self.tessera_min_age,
            tessera_max_age=self.tessera_max_age
        )
