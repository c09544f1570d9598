"""Configuration management for the module."""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, List

def get_default_config() -> Dict[str, Any]:
    """Get default configuration for readiness scoring."""

    config_dir = Path(__file__).parent

    # Try to load YAML configs, fall back to defaults if not found
    weights_config = _load_yaml(config_dir / 'weights.yaml') or _get_default_weights_config()
    readiness_config = _load_yaml(config_dir / 'readiness.yaml') or _get_default_readiness_config()
    regions_config = _load_yaml(config_dir / 'regions.yaml') or _get_default_regions_config()

    return {
        'weights': dict(weights_config.get('base_weights', {})),
        'indicators': weights_config.get('indicators', _get_default_weights_config()['indicators']),
        'tiers': readiness_config.get('tiers', []),
        'regions': regions_config.get('regions', [])
    }

def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except (FileNotFoundError, yaml.YAMLError):
        return {}

def _get_default_weights_config() -> Dict[str, Any]:
    """Default weights configuration."""
    return {
        'base_weights': {
            'P': 0.35,
            'G': 0.25,
            'R': 0.25,
            'H': 0.15
        },
        'indicators': {
            'P': {
                'attribute': 'renewable_potential',
                'label': 'Renewable Potential',
                'long_label': 'Renewable Energy Potential',
                'description': ('Natural suitability for renewable energy deployment including solar '
                                'irradiation levels, wind resource availability, and other renewable sources.')
            },
            'G': {
                'attribute': 'grid_access',
                'label': 'Grid Access',
                'long_label': 'Grid & Infrastructure Accessibility',
                'description': ('Proximity to transmission networks, grid capacity and stability, and '
                                'access to transport infrastructure for project implementation.')
            },
            'R': {
                'attribute': 'regulatory',
                'label': 'Regulatory',
                'long_label': 'Regulatory & Policy Readiness',
                'description': ('Alignment with national renewable energy policies, presence of enabling '
                                'regulations or incentives, and permitting clarity.')
            },
            'H': {
                'attribute': 'implementation',
                'label': 'Implementation',
                'long_label': 'Historical Implementation Capacity',
                'description': ('Track record of completed or ongoing renewable energy projects, '
                                'institutional experience, and evidence of timely delivery.')
            }
        }
    }

def _get_default_readiness_config() -> Dict[str, Any]:
    """Default readiness tiers, highest first."""
    return {
        'tiers': [
            {
                'level': 'High Readiness',
                'min_score': 75,
                'color': 'text-green-600',
                'background': 'bg-green-100',
                'recommendation': 'Priority for immediate public funding'
            },
            {
                'level': 'Moderate Readiness',
                'min_score': 55,
                'color': 'text-yellow-600',
                'background': 'bg-yellow-100',
                'recommendation': 'Conditional funding or preparatory support'
            },
            {
                'level': 'Low Readiness',
                'min_score': None,
                'color': 'text-red-600',
                'background': 'bg-red-100',
                'recommendation': 'Not ready for funding; enabling actions required'
            }
        ]
    }

def _get_default_regions_config() -> Dict[str, List[Dict[str, Any]]]:
    """Default region table."""
    return copy.deepcopy(_DEFAULT_REGIONS)

def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)

def _region(name, p, g, r, h, solar, wind, grid, projects):
    return {
        'name': name, 'P': p, 'G': g, 'R': r, 'H': h,
        'details': {'solar': solar, 'wind': wind, 'grid': grid, 'projects': projects}
    }

_DEFAULT_REGIONS = {
    'regions': [
        _region('Absheron', 85, 90, 88, 82,
                'High', 'Excellent (coastal)', 'Excellent proximity', 'Multiple completed'),
        _region('Ganja-Gazakh', 78, 75, 80, 70,
                'Very High', 'Moderate', 'Good connectivity', 'Several ongoing'),
        _region('Sheki-Zagatala', 65, 60, 72, 55,
                'Moderate', 'Low', 'Limited access', 'Few historical'),
        _region('Lankaran', 72, 65, 70, 58,
                'High', 'Moderate (coastal)', 'Moderate access', 'Some completed'),
        _region('Guba-Khachmaz', 80, 70, 75, 65,
                'High', 'Good (coastal)', 'Good proximity', 'Moderate track record'),
        _region('Shirvan-Salyan', 88, 72, 78, 68,
                'Excellent', 'Very Good (semi-arid)', 'Good infrastructure', 'Growing portfolio'),
        _region('Nakhchivan', 82, 55, 68, 52,
                'Excellent', 'Good', 'Limited connectivity', 'Limited experience'),
    ]
}
