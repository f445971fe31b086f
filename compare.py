import argparse
import sys

import pandas as pd

import constants
from file_reader import parse_grid_file
from search import run_strategy
from util import format_path


def compare_strategies(grid, start=None, end=None):
    """Runs every search strategy on the same grid and tabulates the outcome.

    Returns:
        DataFrame with columns method, nodes_expanded, steps, path sorted by
        steps; strategies that found no route come last with steps shown as
        'No Path Found'.
    """
    temp_paths = []
    for method in constants.ENUM_METHODS:
        method, nodes_expanded, path = run_strategy(grid, method, start, end)
        temp_paths.append({
            'method': method,
            'nodes_expanded': nodes_expanded,
            'steps': len(path) if path else None,
            'path': path,
        })

    paths_df = pd.DataFrame(temp_paths, columns=['method', 'nodes_expanded', 'steps', 'path'])
    paths_df = paths_df.sort_values(by='steps', na_position='last', kind='stable').reset_index(drop=True)
    paths_df['path'] = paths_df['path'].apply(format_path)
    paths_df['steps'] = paths_df['steps'].apply(lambda s: 'No Path Found' if pd.isna(s) else int(s))
    return paths_df


def main(filename):
    grid = parse_grid_file(filename)
    print(f"Problem File: {filename}")
    print(f"Start: {grid.start}  End: {grid.end}")
    paths_df = compare_strategies(grid)
    print(paths_df[['method', 'nodes_expanded', 'steps']].to_string(index=False))
    return paths_df


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Compare all search strategies on one grid file")
    parser.add_argument("filename", help="Grid problem file")
    args = parser.parse_args(argv)
    try:
        main(args.filename)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
