"""
点唱机随机打乱测试

严格检查打乱前后歌曲集合和数量不变；顺序变化只做统计意义上的检查。
"""

import random
import unittest
import sys
import os
from collections import Counter
from unittest.mock import MagicMock

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jukebox.queue import JukeBox, Song
from jukebox.utils.config_manager import ConfigManager


def fill_jukebox(jukebox: JukeBox, count: int) -> list:
    """向点唱机添加若干首歌曲"""
    songs = [Song(f"Song{i}", f"Artist{i}") for i in range(count)]
    for song in songs:
        jukebox.add_song_to_queue(song)
    return songs


class TestJukeBoxShuffle(unittest.TestCase):
    """测试随机打乱"""

    def test_preserves_songs_and_size(self):
        """测试打乱后歌曲集合和数量不变"""
        jukebox = JukeBox(6, rng=random.Random(7))
        songs = fill_jukebox(jukebox, 6)

        for _ in range(20):
            jukebox.shuffle_song_queue()
            queued = jukebox._song_queue.get_list()

            self.assertEqual(jukebox.size(), 6)
            self.assertEqual(Counter(str(song) for song in queued), Counter(str(song) for song in songs))

    def test_order_changes_over_trials(self):
        """测试多次打乱中顺序至少变化一次"""
        jukebox = JukeBox(5, rng=random.Random(1234))
        fill_jukebox(jukebox, 5)
        original = str(jukebox)

        orderings = set()
        for _ in range(30):
            jukebox.shuffle_song_queue()
            orderings.add(str(jukebox))

        self.assertGreater(len(orderings - {original}), 0)
        self.assertGreater(len(orderings), 1)

    def test_same_seed_same_order(self):
        """测试相同种子产生相同的打乱结果"""
        first = JukeBox(8, rng=random.Random(99))
        second = JukeBox(8, rng=random.Random(99))
        fill_jukebox(first, 8)
        fill_jukebox(second, 8)

        first.shuffle_song_queue()
        second.shuffle_song_queue()

        self.assertEqual(str(first), str(second))

    def test_injected_random_source_is_used(self):
        """测试使用注入的随机源，并按其结果重建队列"""
        rng = MagicMock()
        rng.shuffle.side_effect = lambda items: items.reverse()

        jukebox = JukeBox(3, rng=rng)
        songs = fill_jukebox(jukebox, 3)
        jukebox.shuffle_song_queue()

        rng.shuffle.assert_called_once()
        self.assertEqual([jukebox.play_song() for _ in songs], list(reversed(songs)))

    def test_per_call_random_source(self):
        """测试单次调用传入的随机源优先"""
        default_rng = MagicMock()
        call_rng = MagicMock()
        call_rng.shuffle.side_effect = lambda items: items.reverse()

        jukebox = JukeBox(2, rng=default_rng)
        song_a, song_b = fill_jukebox(jukebox, 2)
        jukebox.shuffle_song_queue(rng=call_rng)

        default_rng.shuffle.assert_not_called()
        self.assertEqual(jukebox.peek_next_song(), song_b)

    def test_shuffle_empty_and_single(self):
        """测试空队列和单首歌曲打乱后不变"""
        jukebox = JukeBox(2)
        jukebox.shuffle_song_queue()
        self.assertEqual(str(jukebox), "END")

        song = Song("Only", "Artist")
        jukebox.add_song_to_queue(song)
        jukebox.shuffle_song_queue()
        self.assertEqual(str(jukebox), f"{song} -> END")

    def test_shuffled_queue_still_fifo_and_deduped(self):
        """测试打乱后仍按新顺序播放且去重仍然有效"""
        jukebox = JukeBox(4, rng=random.Random(3))
        fill_jukebox(jukebox, 3)
        jukebox.shuffle_song_queue()

        expected = jukebox._song_queue.get_list()
        jukebox.add_song_to_queue(Song("Extra", "Artist"))
        self.assertTrue(jukebox.is_full())

        played = [jukebox.play_song() for _ in range(4)]
        self.assertEqual(played[:3], expected)

    def test_seed_from_config(self):
        """测试未注入随机源时使用配置中的种子"""
        config = MagicMock(spec=ConfigManager)
        config.get.side_effect = lambda key, default=None: {'jukebox.shuffle_seed': 5}.get(key, default)

        first = JukeBox(6, config_manager=config)
        second = JukeBox(6, config_manager=config)
        fill_jukebox(first, 6)
        fill_jukebox(second, 6)

        first.shuffle_song_queue()
        second.shuffle_song_queue()

        self.assertEqual(str(first), str(second))

    def test_invalid_seed_is_ignored(self):
        config = MagicMock(spec=ConfigManager)
        config.get.side_effect = lambda key, default=None: {'jukebox.shuffle_seed': "abc"}.get(key, default)

        with self.assertLogs("jukebox.queue.jukebox", level="WARNING"):
            jukebox = JukeBox(2, config_manager=config)
        self.assertEqual(jukebox.capacity(), 2)


if __name__ == '__main__':
    unittest.main()
