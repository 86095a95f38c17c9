"""
Example 1: Shifted Square Target

Sample the density f(x) = (x - 0.5)^2 on [0, 1] with Metropolis-Hastings
and compare the rescaled histogram of the chain to the density itself.

Setup:
    x0 ~ U(0, 1)
    proposal: small step U(-0.05, 0.05) with probability 0.5,
              otherwise an independent redraw U(0, 1)
"""

import numpy as np
import matplotlib.pyplot as plt
from metropolis1d import SamplingConfig, TargetType, sample_density, histogram_steps


def main():
    print("\n" + "="*70)
    print("Example 1: Shifted Square Target")
    print("="*70 + "\n")

    config = SamplingConfig(
        seed=0,
        target=TargetType.SHIFTED_SQUARE,
        small_mutate_prob=0.5,
        burn_in_samples=100,
        metropolis_samples=10000,
        num_bins=50,
    )

    result = sample_density(config, verbose=True)
    result.metropolis.print_summary()

    # The density is symmetric around 0.5
    print(f"\nTrue mean: 0.500, estimated: {result.metropolis.summary()['mean']:.3f}")

    # Visualize results
    print("\nCreating visualization...")
    x_ref = np.linspace(0.0, 1.0, 1024)
    x_hist, y_hist = histogram_steps(result.density)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(x_ref, result.reference(x_ref), color='green', linewidth=2,
            label='reference')
    ax.plot(x_hist, y_hist, color='red', linewidth=1.5, label='sampled')
    ax.set_xlabel('x')
    ax.set_ylabel('f(x)')
    ax.set_title('1D Metropolis Sampling: Shifted Square')
    ax.legend()
    ax.grid(alpha=0.3)
    plt.tight_layout()

    output_file = '01_shifted_square_results.png'
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"Saved visualization to: {output_file}")

    print("\n" + "="*70)
    print("Example completed successfully!")
    print("="*70 + "\n")


if __name__ == "__main__":
    main()
