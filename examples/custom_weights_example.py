"""Ranking with alternative indicator weights."""

from clean_energy_readiness import score_regions

def main():
    default = score_regions()

    # Emphasize grid access over renewable potential
    grid_focused = score_regions(weights_config={
        'P': 0.25,
        'G': 0.35,
        'R': 0.25,
        'H': 0.15,
    })

    print("=== Default vs Grid-Focused Weights ===")
    print(f"{'Region':<16} {'Default':>8} {'Grid':>8}")
    grid_scores = {scored.name: scored.cers for scored in grid_focused}
    for scored in default:
        print(f"{scored.name:<16} {scored.cers:>8} {grid_scores[scored.name]:>8}")

if __name__ == "__main__":
    main()
