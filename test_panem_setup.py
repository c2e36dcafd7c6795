#!/usr/bin/env python3
"""
Tests for loading Panem from input files and for configuration handling.

This test file focuses on:
- Parsing the whitespace-separated input format
- Tessera eligibility and population parity
- Skipping unmatched and malformed people
- CSV input
- YAML configuration and defaults
"""

import os
import shutil
import tempfile
import unittest

import pandas as pd
import yaml

from config.config_manager import ConfigManager
from loaders.panem_loader import PERSON_COLUMNS, PanemLoader
from registry.district_registry import DistrictRegistry


SAMPLE_INPUT = """3
12
4
9
7
Katniss Everdeen 5 16 12 9
Peeta Mellark 10 16 12 7
Gale Hawthorne 9 18 12 8
Cato Hadley 6 18 4 10
Clove Kentwell 3 17 4 6
Rue Barton 7 12 9 3
Thresh Reaper 8 18 9 9
"""


class TestPanemLoader(unittest.TestCase):
    """Test cases for the input loader."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.registry = DistrictRegistry()
        self.loader = PanemLoader(self.registry)
    
    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)
    
    def _write_input(self, content, name="input.in"):
        path = os.path.join(self.test_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path
    
    def _staged(self, district_id):
        for district in self.registry.staged:
            if district.district_id == district_id:
                return district
        return None
    
    def test_districts_staged_in_input_order(self):
        """Test that district ids are staged in order of appearance."""
        districts, people = self.loader.load(self._write_input(SAMPLE_INPUT))
        
        self.assertEqual(districts, 3)
        self.assertEqual(people, 7)
        self.assertEqual([d.district_id for d in self.registry.staged], [12, 4, 9])
        self.assertTrue(self.registry.is_empty())
    
    def test_people_split_by_birth_month_parity(self):
        """Test that people land in the odd or even population of their district."""
        self.loader.load(self._write_input(SAMPLE_INPUT))
        district_12 = self._staged(12)
        
        self.assertEqual([p.first_name for p in district_12.odd_population], ['Katniss', 'Gale'])
        self.assertEqual([p.first_name for p in district_12.even_population], ['Peeta'])
        self.assertEqual(district_12.odd_population[0].effectiveness, 9)
    
    def test_tessera_assigned_from_age(self):
        """Test that tessera holds exactly for ages 12 to 17."""
        self.loader.load(self._write_input(SAMPLE_INPUT))
        people = {p.first_name: p for d in self.registry.staged
                  for p in d.odd_population + d.even_population}
        
        self.assertTrue(people['Katniss'].tessera)
        self.assertTrue(people['Clove'].tessera)
        self.assertTrue(people['Rue'].tessera)
        self.assertFalse(people['Gale'].tessera)
        self.assertFalse(people['Thresh'].tessera)
    
    def test_tessera_window_from_config(self):
        """Test that the tessera ages can be configured."""
        loader = PanemLoader(self.registry, {'tessera_min_age': 16, 'tessera_max_age': 17})
        loader.load(self._write_input(SAMPLE_INPUT))
        people = {p.first_name: p for d in self.registry.staged
                  for p in d.odd_population + d.even_population}
        
        self.assertTrue(people['Katniss'].tessera)
        self.assertFalse(people['Clove'].tessera)
        self.assertFalse(people['Rue'].tessera)
    
    def test_unmatched_and_malformed_people_skipped(self):
        """Test that bad person rows are skipped without stopping the load."""
        content = """2
1 2
5
Anna Smith 1 15 1 5
Ben Jones 2 20 3 5
Cara Lee 13 20 1 5
Dan Ray x 20 2 5
Eve Moss 4 30 2 1
"""
        districts, people = self.loader.load(self._write_input(content))
        
        self.assertEqual(districts, 2)
        self.assertEqual(people, 2)
        self.assertEqual([p.first_name for p in self._staged(1).odd_population], ['Anna'])
        self.assertEqual([p.first_name for p in self._staged(2).even_population], ['Eve'])
    
    def test_repeated_district_id_keeps_people_in_first(self):
        """Test that people go to the first staged district when an id repeats."""
        content = "3\n1 1 2\n3\nAnna Smith 1 15 1 5\nBen Jones 2 20 1 5\nCara Lee 3 20 2 5\n"
        
        districts, people = self.loader.load(self._write_input(content))
        first, duplicate = self.registry.staged[0], self.registry.staged[1]
        self.registry.add_all()
        
        self.assertEqual((districts, people), (3, 3))
        self.assertIs(self.registry.find(1), first)
        self.assertEqual([p.first_name for p in first.odd_population], ['Anna'])
        self.assertEqual([p.first_name for p in first.even_population], ['Ben'])
        self.assertEqual(self.registry.staged, [duplicate])
        self.assertEqual(duplicate.odd_population + duplicate.even_population, [])
    
    def test_incomplete_last_person_dropped(self):
        """Test that a trailing partial person row is ignored."""
        content = "1\n1\n2\nAnna Smith 1 15 1 5\nBen Jones 2\n"
        
        districts, people = self.loader.load(self._write_input(content))
        
        self.assertEqual((districts, people), (1, 1))
    
    def test_missing_file_loads_nothing(self):
        """Test that an unreadable input file yields nothing."""
        result = self.loader.load(os.path.join(self.test_dir, "missing.in"))
        
        self.assertEqual(result, (0, 0))
        self.assertEqual(self.registry.staged, [])
    
    def test_truncated_header_raises(self):
        """Test that missing district ids or counts are reported."""
        with self.assertRaises(ValueError):
            self.loader.load(self._write_input("3\n1 2\n"))
        with self.assertRaises(ValueError):
            PanemLoader(DistrictRegistry()).load(self._write_input("1\n1\n", "short.in"))
        with self.assertRaises(ValueError):
            PanemLoader(DistrictRegistry()).load(self._write_input("", "empty.in"))
    
    def test_load_people_from_csv(self):
        """Test loading people from a headed CSV file."""
        self.loader.load(self._write_input("2\n1 2\n0\n"))
        csv_path = os.path.join(self.test_dir, "people.csv")
        pd.DataFrame([
            {'first_name': 'Anna', 'last_name': 'Smith', 'birth_month': 1, 'age': 15,
             'district_id': 1, 'effectiveness': 4},
            {'first_name': 'Ben', 'last_name': 'Jones', 'birth_month': 6, 'age': 30,
             'district_id': 2, 'effectiveness': 2},
            {'first_name': 'Cara', 'last_name': 'Lee', 'birth_month': 6, 'age': 30,
             'district_id': 8, 'effectiveness': 2},
        ], columns=PERSON_COLUMNS).to_csv(csv_path, index=False)
        
        self.assertEqual(self.loader.load_people_from_csv(csv_path), 2)
        self.assertTrue(self._staged(1).odd_population[0].tessera)
        self.assertEqual(self._staged(2).even_population[0].last_name, 'Jones')
    
    def test_csv_missing_columns(self):
        """Test that a CSV without the person columns loads nothing."""
        csv_path = os.path.join(self.test_dir, "bad.csv")
        pd.DataFrame([{'name': 'Anna'}]).to_csv(csv_path, index=False)
        
        self.assertEqual(self.loader.load_people_from_csv(csv_path), 0)
        self.assertEqual(self.loader.load_people_from_csv(os.path.join(self.test_dir, "none.csv")), 0)


class TestConfigManager(unittest.TestCase):
    """Test cases for configuration loading."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, "test_config.yaml")
    
    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)
    
    def test_config_loading(self):
        """Test configuration loading from YAML file."""
        with open(self.config_path, 'w') as f:
            yaml.dump({'seed': 7, 'max_rounds': 3, 'report_dir': 'out'}, f)
        
        config = ConfigManager.load_config(self.config_path)
        
        self.assertEqual(config['seed'], 7)
        self.assertEqual(config['max_rounds'], 3)
        self.assertEqual(config['report_dir'], 'out')
        self.assertEqual(config['tessera_min_age'], 12)
    
    def test_default_config_fallback(self):
        """Test fallback to default config when file is missing."""
        config = ConfigManager.load_config(os.path.join(self.test_dir, "nonexistent.yaml"))
        
        self.assertEqual(config, ConfigManager.get_default_config())
        self.assertEqual(config['seed'], 2023)
    
    def test_invalid_yaml_fallback(self):
        """Test fallback to default config when the file cannot be parsed."""
        with open(self.config_path, 'w') as f:
            f.write("seed: [unclosed\n")
        
        self.assertEqual(ConfigManager.load_config(self.config_path), ConfigManager.get_default_config())
    
    def test_empty_config_uses_defaults(self):
        """Test that an empty file yields the defaults."""
        open(self.config_path, 'w').close()
        
        self.assertEqual(ConfigManager.load_config(self.config_path)['duel_roll_sides'], 10)


if __name__ == '__main__':
    unittest.main()
