#!/usr/bin/env python3
"""
点唱机演示程序 - 程序入口

负责配置加载、日志设置，然后用一张示例专辑演示导入、打乱和播放流程。
"""
import logging

from jukebox.queue import Album, JukeBox, Song
from jukebox.utils.config_manager import ConfigManager
from jukebox.utils.logger import setup_logger

SAMPLE_ALBUM = "Abbey Road"
SAMPLE_SONGS = [
    ("Come Together", "The Beatles", 259),
    ("Something", "The Beatles", 182),
    ("Maxwell's Silver Hammer", "The Beatles", 207),
    ("Oh! Darling", "The Beatles", 206),
    ("Octopus's Garden", "The Beatles", 171),
]


def main() -> int:
    """
    点唱机演示主入口函数。

    Returns:
        int: 退出代码（0表示成功，1表示错误）
    """
    try:
        config = ConfigManager()
    except FileNotFoundError as e:
        logging.basicConfig(level=logging.INFO)
        logging.getLogger("jukebox").error(f"❌ 配置文件错误: {e}")
        logging.getLogger("jukebox").error("请将 config/config.yaml.example 复制为 config/config.yaml")
        return 1

    setup_logger(
        log_level=config.get_log_level(),
        log_file=config.get_log_file(),
        max_size=config.get_log_max_size(),
        backup_count=config.get_log_backup_count()
    )
    logger = logging.getLogger("jukebox")

    logger.info("=" * 60)
    logger.info("🎵 点唱机启动中...")
    logger.info("=" * 60)
    _log_configuration(logger, config)

    try:
        album = Album(SAMPLE_ALBUM)
        for title, artist, duration in SAMPLE_SONGS:
            album.add_song(Song(title, artist, duration))
        logger.info(f"专辑内容:\n{album}")

        jukebox = JukeBox.from_config(config)
        jukebox.add_album_to_queue(album)
        logger.info(f"导入后的队列: {jukebox}")

        jukebox.shuffle_song_queue()
        logger.info(f"打乱后的队列: {jukebox}")

        while not jukebox.is_empty():
            jukebox.play_song()

        logger.info(f"播放完毕: {jukebox}")

    except Exception as e:
        logger.error(f"❌ 运行点唱机时发生意外错误: {e}", exc_info=True)
        return 1

    return 0


def _log_configuration(logger: logging.Logger, config: ConfigManager) -> None:
    """
    记录配置摘要，用于调试。

    Args:
        logger: 日志记录器实例
        config: 配置管理器
    """
    logger.info("📋 配置摘要:")
    logger.info(f"   队列容量: {config.get_default_capacity()}")
    logger.info(f"   随机种子: {config.get_shuffle_seed()}")
    logger.info(f"   日志级别: {config.get_log_level()}")
    logger.info("=" * 60)

if __name__ == "__main__":
    exit(main())
