# random_source.py
import random

import torch


class RandomSource:
    """
    随机数来源接口，只需要实现 next(bound)：
    返回 [0, bound) 内均匀分布的整数。
    由调用者创建和持有，moves.random_move 只负责取值。
    """

    def next(self, bound):
        raise NotImplementedError


def _check_bound(bound):
    if bound <= 0:
        raise ValueError(f"bound 必须为正整数: {bound}")


class PythonRandomSource(RandomSource):
    """基于 random.Random；给定 seed 时结果可复现。"""

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def next(self, bound):
        _check_bound(bound)
        return self.rng.randrange(bound)


class TorchRandomSource(RandomSource):
    """基于 torch.Generator，和数据生成/训练共用同一套随机数。"""

    def __init__(self, seed=None, device='cpu'):
        self.generator = torch.Generator(device=device)
        if seed is None:
            self.generator.seed()
        else:
            self.generator.manual_seed(seed)
        self.device = device

    def next(self, bound):
        _check_bound(bound)
        value = torch.randint(0, bound, (1,), generator=self.generator, device=self.device)
        return int(value.item())
