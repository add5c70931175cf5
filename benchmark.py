import numpy as np
from ukkonen_index import build
import time
from typing import List, Tuple
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

def generate_random_strings(n: int, length: int, alphabet: str) -> List[str]:
    """Generate n random strings of given length over alphabet"""
    return [''.join(np.random.choice(list(alphabet), length)) for _ in range(n)]

def run_benchmark(n_strings: int, string_length: int, alphabet: str) -> Tuple[float, float]:
    """Run benchmark and return average build and query time per string"""
    strings = generate_random_strings(n_strings, string_length, alphabet)

    start_time = time.time()
    trees = [build(s) for s in strings]
    build_time = (time.time() - start_time) / n_strings

    # Query every tree with a 20-character window of its own text
    start_time = time.time()
    for s, tree in zip(strings, trees):
        offset = len(s) // 2
        tree.contains_substring(s[offset:offset + 20])
    query_time = (time.time() - start_time) / n_strings

    return build_time, query_time

def main():
    # Test parameters
    string_lengths = [100, 500, 1000, 2000, 4000]
    alphabets = {'binary': '01', 'dna': 'acgt', 'letters': 'abcdefghijklmnopqrstuvwxyz'}
    n_strings = 10

    # Results storage
    results = []

    try:
        for alphabet_name, alphabet in alphabets.items():
            for string_length in string_lengths:
                print(f"Testing: {n_strings} {alphabet_name} strings of length {string_length}")
                build_time, query_time = run_benchmark(n_strings, string_length, alphabet)
                results.append({
                    'alphabet': alphabet_name,
                    'string_length': string_length,
                    'build_time': build_time,
                    'query_time': query_time,
                    'build_us_per_char': build_time / string_length * 1e6,
                })

        # Convert to DataFrame and save results
        df = pd.DataFrame(results)
        df.to_csv('benchmark_results.csv', index=False)

        # Print summary statistics
        print("\nBenchmark Summary:")
        print("=================")
        for alphabet_name in alphabets:
            data = df[df['alphabet'] == alphabet_name]
            print(f"\nAlphabet: {alphabet_name}")
            print(f"Build cost per character: {data['build_us_per_char'].min():.1f}-{data['build_us_per_char'].max():.1f} us")
            print(f"Longest build: {data['build_time'].max():.3f}s")

        # Create visualization
        plt.figure(figsize=(12, 6))

        # Construction time should grow linearly with length
        plt.subplot(1, 2, 1)
        sns.lineplot(data=df, x='string_length', y='build_time', hue='alphabet', marker='o')
        plt.xlabel('Text Length')
        plt.ylabel('Build Time (s)')
        plt.title('Build Time vs Text Length')
        plt.grid(True, alpha=0.3)

        plt.subplot(1, 2, 2)
        sns.lineplot(data=df, x='string_length', y='build_us_per_char', hue='alphabet', marker='o')
        plt.xlabel('Text Length')
        plt.ylabel('Microseconds per Character')
        plt.title('Per-Character Build Cost')
        plt.grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig('benchmark_results.png', dpi=300, bbox_inches='tight')
        plt.close()

    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user.")

if __name__ == '__main__':
    main()
