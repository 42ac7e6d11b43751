from dataclasses import dataclass

from querysense.domain import PerformanceComparison, WorkloadCategory

MODERATE_THRESHOLD = 50
HEAVY_THRESHOLD = 100
SECONDS_PER_POINT = 0.005
ROWS_PER_POINT = 150
OPTIMIZED_COST_RATIO = 0.4
IMPROVEMENT_PERCENT = 60


@dataclass(frozen=True, slots=True)
class Classification:
    category: WorkloadCategory
    estimated_execution_time: str
    estimated_rows_scanned: int
    performance_comparison: PerformanceComparison


def categorize(score: int) -> WorkloadCategory:
    if score > HEAVY_THRESHOLD:
        return WorkloadCategory.HEAVY
    if score > MODERATE_THRESHOLD:
        return WorkloadCategory.MODERATE
    return WorkloadCategory.FAST


def classify(score: int) -> Classification:
    """Derive the category and synthetic estimates from a final complexity score."""
    return Classification(
        category=categorize(score),
        estimated_execution_time=f"{score * SECONDS_PER_POINT:.2f}s",
        estimated_rows_scanned=score * ROWS_PER_POINT,
        performance_comparison=PerformanceComparison(
            original_cost=score,
            optimized_cost=round(score * OPTIMIZED_COST_RATIO),
            improvement_percent=IMPROVEMENT_PERCENT,
        ),
    )
