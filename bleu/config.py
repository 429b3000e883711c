import math
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from bleu.constants import DEFAULT_WEIGHTS


class BleuConfig(BaseModel):
    """BLEU scoring configuration"""
    weights: List[float] = Field(
        default_factory=lambda: list(DEFAULT_WEIGHTS),
        description="Per-order weights, index i belongs to n-gram order i+1. The length selects the maximum order."
    )
    smoothing: bool = Field(
        default=False,
        description="Whether to add one to numerator and denominator of every order's precision"
    )

    @field_validator('weights')
    def validate_weights(cls, v):
        """Validate the weight vector"""
        if not v:
            raise ValueError('At least one n-gram weight is required')
        invalid_weights = [weight for weight in v if not math.isfinite(weight) or weight < 0]
        if invalid_weights:
            raise ValueError(f'Weights must be finite and non-negative, got: {invalid_weights}')
        return v

    @property
    def max_order(self) -> int:
        return len(self.weights)

    @classmethod
    def from_yaml_file(cls, file_path: Union[str, Path]) -> 'BleuConfig':
        """Load configuration from YAML file"""
        with open(file_path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f) or {}
        return cls(**config_dict)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert to YAML format string"""
        return yaml.dump(self.model_dump(), default_flow_style=False, allow_unicode=True)


def load_bleu_config(config_path: Union[str, Path]) -> BleuConfig:
    """Load BLEU configuration"""
    return BleuConfig.from_yaml_file(config_path)


def validate_bleu_config(config_dict: dict) -> BleuConfig:
    """Validate a configuration dictionary"""
    return BleuConfig(**config_dict)
