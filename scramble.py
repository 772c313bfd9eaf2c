# scramble.py
import os
import sys

import pycuber as pc
from omegaconf import OmegaConf
from tqdm import tqdm

from moves import random_move, move_to_str
from move_sequence import MoveSequence, invert_sequence, format_sequence
from random_source import PythonRandomSource, TorchRandomSource

DEFAULT_CONFIG = OmegaConf.create({
    'scramble': {
        'num_scrambles': 5,
        'min_scramble': 8,
        'max_scramble': 25,
        'seed': None,
        'backend': 'python',  # python | torch
    }
})

RNG_BACKENDS = {
    'python': PythonRandomSource,
    'torch': TorchRandomSource,
}


def load_config(path='config.yaml', cli_args=None):
    """
    默认配置 <- config.yaml (存在时) <- 命令行 key=value 覆盖。
    cli_args 为 None 时不读命令行。
    """
    # merge 生成新对象，调用者修改返回值不会影响 DEFAULT_CONFIG
    config = OmegaConf.merge(DEFAULT_CONFIG)
    if path is not None and os.path.exists(path):
        config = OmegaConf.merge(config, OmegaConf.load(path))
    if cli_args is not None:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(list(cli_args)))

    cfg = config.scramble
    if cfg.min_scramble < 0 or cfg.max_scramble < 0:
        raise ValueError("打乱步数不能为负")
    if cfg.min_scramble > cfg.max_scramble:
        raise ValueError(f"min_scramble ({cfg.min_scramble}) 大于 max_scramble ({cfg.max_scramble})")
    if cfg.backend not in RNG_BACKENDS:
        raise ValueError(f"未知的随机数后端: {cfg.backend}")
    return config


def make_rng(config):
    cfg = config.scramble
    return RNG_BACKENDS[cfg.backend](seed=cfg.seed)


def random_scramble(rng, length):
    """连续取 length 个随机转动 (不做同面过滤)。"""
    if length < 0:
        raise ValueError(f"打乱步数不能为负: {length}")
    seq = MoveSequence()
    for _ in range(length):
        seq.append(random_move(rng))
    return seq


def generate_scramble_and_solution(rng, min_scramble=3, max_scramble=25):
    """
    随机生成打乱和对应的逆序还原操作序列 (不调用任何求解器)。
    返回 (scramble, solution)，solution 就是 scramble 的逆序列。
    """
    if min_scramble < 0 or min_scramble > max_scramble:
        raise ValueError(f"非法的打乱步数范围: [{min_scramble}, {max_scramble}]")
    k = min_scramble + rng.next(max_scramble - min_scramble + 1)
    scramble_moves = random_scramble(rng, k)
    return scramble_moves, invert_sequence(scramble_moves)


def generate_scrambles(n, rng, min_scramble=8, max_scramble=25, progress=True):
    """批量生成 n 条 (scramble, solution)。"""
    results = []
    for _ in tqdm(range(n), desc="Scrambling", disable=not progress):
        results.append(generate_scramble_and_solution(rng, min_scramble, max_scramble))
    return results


def apply_sequence(cube, sequence):
    """把序列逐步作用到 pycuber.Cube 上 (原地修改)，返回 cube。"""
    for move in sequence:
        cube(move_to_str(move))
    return cube


def random_scramble_cube(rng, steps=20):
    """随机打乱一个魔方并返回 (cube, moves)"""
    moves = random_scramble(rng, steps)
    c = apply_sequence(pc.Cube(), moves)
    return c, moves


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    config = load_config(cli_args=args)
    cfg = config.scramble
    rng = make_rng(config)

    print(f"正在生成 {cfg.num_scrambles} 条打乱 (backend={cfg.backend}, seed={cfg.seed})...")
    pairs = generate_scrambles(cfg.num_scrambles, rng, cfg.min_scramble, cfg.max_scramble)
    for i, (scramble_moves, solution_moves) in enumerate(pairs):
        print(f"[{i}] Scramble moves: {format_sequence(scramble_moves)}")
        print(f"[{i}] Solution moves: {format_sequence(solution_moves)}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
