"""
Example 2: Expected Value Technique

Sample |sin(10x)| on [0, 1] twice with the same seed, once recording the
random outcome of every transition and once recording its expected value,
and compare how far each histogram lies from the density.
"""

import numpy as np
import matplotlib.pyplot as plt
from metropolis1d import SamplingConfig, TargetType, sample_density, histogram_steps


def main():
    print("\n" + "="*70)
    print("Example 2: Expected Value Technique")
    print("="*70 + "\n")

    config = SamplingConfig(
        seed=7,
        target=TargetType.SINUS,
        small_mutate_prob=0.5,
        burn_in_samples=100,
        metropolis_samples=5000,
        num_bins=50,
    )

    standard = sample_density(config)
    expected = sample_density(config, expected_value_technique=True)

    # Reference density at bin centres
    num_bins = config.num_bins
    centres = (np.arange(num_bins) + 0.5) / num_bins
    truth = standard.reference(centres)

    print(f"{'Mode':<18} {'Records':<10} {'RMS error':<10}")
    print("-"*40)
    for label, result in [('standard', standard), ('expected value', expected)]:
        rms = np.sqrt(np.mean((result.density - truth) ** 2))
        print(f"{label:<18} {len(result.metropolis):<10d} {rms:<10.4f}")

    # Visualize results
    print("\nCreating visualization...")
    x_ref = np.linspace(0.0, 1.0, 1024)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5), sharey=True)
    for ax, (label, result) in zip(axes, [('standard', standard),
                                          ('expected value', expected)]):
        x_hist, y_hist = histogram_steps(result.density)
        ax.plot(x_ref, result.reference(x_ref), color='green', linewidth=2,
                label='reference')
        ax.plot(x_hist, y_hist, color='red', linewidth=1.5, label='sampled')
        ax.set_xlabel('x')
        ax.set_title(f'Sinus: {label}')
        ax.legend()
        ax.grid(alpha=0.3)
    axes[0].set_ylabel('f(x)')

    plt.suptitle('1D Metropolis Sampling: Expected Value Technique', fontsize=14)
    plt.tight_layout()

    output_file = '02_sinus_expected_value_results.png'
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"Saved visualization to: {output_file}")

    print("\n" + "="*70)
    print("Example completed successfully!")
    print("="*70 + "\n")


if __name__ == "__main__":
    main()
