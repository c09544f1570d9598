"""Basic usage examples for clean energy readiness scoring."""

from clean_energy_readiness import RegionScorer, build_comparison_matrix, score_regions
from clean_energy_readiness.exporters import export

def simple_example():
    """Rank the packaged regions."""
    print("=== Simple Usage Example ===")

    ranked = score_regions()

    for rank, scored in enumerate(ranked, start=1):
        print(f"{rank}. {scored.name:<16} {scored.cers:>5}  {scored.readiness.level}")
    print()

    return ranked

def comparison_example():
    """Compare the top three regions side by side."""
    print("=== Comparison Example ===")

    ranked = score_regions()
    matrix = build_comparison_matrix(ranked[:3])

    print(matrix)
    print()

    return matrix

def export_example(output_dir="."):
    """Write CSV, JSON and text report exports."""
    print("=== Export Example ===")

    scorer = RegionScorer()
    ranked = scorer.rank()

    for kind in ("csv", "json", "report"):
        path = export(kind, ranked, scorer=scorer).write(output_dir)
        print(f"Wrote {path}")
    print()

if __name__ == "__main__":
    simple_example()
    comparison_example()
    export_example()
