from bleu.exceptions import InvalidInput
from bleu.config import BleuConfig
from bleu.scorer import calculate_bleu, compute, smooth
from bleu.metrics.bleu_statistics import BleuStatisticsCollector
