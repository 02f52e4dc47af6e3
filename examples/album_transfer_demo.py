#!/usr/bin/env python3
"""
专辑导入功能演示脚本

展示专辑导入点唱机时如何保持原始添加顺序，
以及队列容量不足或出现重复歌曲时导入的歌曲会被丢弃。
"""

import random
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jukebox.queue import Album, JukeBox, Song, CapacityExceededError, DuplicateSongError


def create_album(name: str, count: int) -> Album:
    """创建带有若干首歌曲的专辑"""
    album = Album(name)
    for i in range(1, count + 1):
        album.add_song(Song(f"Track {i}", name, 150 + i * 10))
    return album


def demo_order_preserved():
    """演示导入后保持专辑原始顺序"""
    print("📀 导入顺序演示 (容量: 5)")

    album = create_album("Demo Album", 3)
    print(f"   专辑内容（从新到旧）:\n{album}")

    jukebox = JukeBox(5)
    added = jukebox.add_album_to_queue(album)

    print(f"   ✅ 加入 {added} 首: {jukebox}")
    print(f"   专辑剩余: {album.size()} 首")


def demo_capacity_drop():
    """演示容量不足时最新的歌曲被丢弃"""
    print("\n📦 容量不足演示 (容量: 2)")

    album = create_album("Big Album", 4)
    jukebox = JukeBox(2)
    added = jukebox.add_album_to_queue(album)

    print(f"   ✅ 加入 {added} 首: {jukebox}")
    print(f"   ⚠️ 专辑剩余: {album.size()} 首（其余歌曲已被丢弃）")

    try:
        jukebox.add_song_to_queue(Song("Encore", "Big Album"))
    except CapacityExceededError as e:
        print(f"   ❌ 队列已满: {e}")


def demo_duplicate_skip():
    """演示导入时跳过重复歌曲"""
    print("\n🔁 重复跳过演示 (容量: 5)")

    jukebox = JukeBox(5)
    jukebox.add_song_to_queue(Song("Track 2", "Mixed Album"))

    album = create_album("Mixed Album", 3)
    added = jukebox.add_album_to_queue(album)
    print(f"   ✅ 加入 {added} 首（跳过重复）: {jukebox}")

    try:
        jukebox.add_song_to_queue(Song("Track 1", "Mixed Album"))
    except DuplicateSongError as e:
        print(f"   ❌ 重复歌曲: {e}")


def demo_shuffle():
    """演示使用固定种子打乱队列"""
    print("\n🔀 打乱演示 (种子: 42)")

    jukebox = JukeBox(6, rng=random.Random(42))
    jukebox.add_album_to_queue(create_album("Shuffle Album", 6))

    print(f"   打乱前: {jukebox}")
    jukebox.shuffle_song_queue()
    print(f"   打乱后: {jukebox}")

    while not jukebox.is_empty():
        print(f"   ▶️ 播放: {jukebox.play_song()}")


def main():
    """运行所有演示"""
    demo_order_preserved()
    demo_capacity_drop()
    demo_duplicate_skip()
    demo_shuffle()


if __name__ == "__main__":
    main()
