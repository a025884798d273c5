"""Play or save tracks through an external downloader and player."""

from __future__ import annotations

import shutil
import subprocess
import warnings
from collections.abc import Callable, Iterable
from pathlib import Path

from xmplay.core.config import Config
from xmplay.core.errors import MissingDependencyError, NoLinkWarning, PlaybackError
from xmplay.core.models import NormalizedTrack, PlaybackMode
from xmplay.utils.text import sanitize_filename


class PlaybackDispatcher:
    """Runs ``downloader | player`` (or ``downloader`` alone) for a track link.

    Exit codes of the external tools are not inspected.
    """

    def __init__(
        self,
        downloader: str = "yt-dlp",
        player: str = "ffplay",
        audio_format: str = "mp3",
        output_dir: Path | None = None,
    ) -> None:
        self.downloader = downloader
        self.player = player
        self.audio_format = audio_format
        self.output_dir = output_dir or Path(".")

    @classmethod
    def from_config(cls, config: Config) -> PlaybackDispatcher:
        """Create a dispatcher from the [playback] config section."""
        return cls(
            downloader=config.playback.downloader,
            player=config.playback.player,
            audio_format=config.playback.audio_format,
            output_dir=config.playback.get_output_dir(),
        )

    def check_dependencies(self, mode: PlaybackMode = PlaybackMode.PLAY) -> None:
        """
        Verify the executables needed for ``mode`` are on the PATH.

        Raises:
            MissingDependencyError: Naming every executable that was not found
        """
        required = [self.downloader]
        if mode == PlaybackMode.PLAY:
            required.append(self.player)

        missing = [name for name in required if shutil.which(name) is None]
        if missing:
            raise MissingDependencyError(missing)

    def play(
        self,
        track: NormalizedTrack,
        mode: PlaybackMode = PlaybackMode.PLAY,
        quiet: bool = False,
    ) -> bool:
        """
        Play or download one track, blocking until the tools exit.

        Tracks without a link are skipped with a NoLinkWarning.

        Returns:
            True if processes were started, False if the track was skipped

        Raises:
            PlaybackError: If an external process cannot be started
        """
        if not track.link:
            warnings.warn(
                f"No link for '{track.artist} - {track.title}', skipping.",
                NoLinkWarning,
                stacklevel=2,
            )
            return False

        if mode == PlaybackMode.DOWNLOAD:
            self._download(track, quiet)
        else:
            self._stream(track.link, quiet)
        return True

    def play_all(
        self,
        tracks: Iterable[NormalizedTrack],
        mode: PlaybackMode = PlaybackMode.PLAY,
        quiet: bool = False,
        on_start: Callable[[NormalizedTrack], None] | None = None,
    ) -> int:
        """
        Dispatch tracks in order after a single dependency check.

        ``on_start`` is called for each track just before its processes start.

        Returns:
            Number of tracks that were played or downloaded

        Raises:
            MissingDependencyError: Before anything is spawned
            PlaybackError: If an external process cannot be started
        """
        self.check_dependencies(mode)

        dispatched = 0
        for track in tracks:
            if track.link and on_start is not None:
                on_start(track)
            if self.play(track, mode, quiet):
                dispatched += 1
        return dispatched

    def stream_command(self, link: str, quiet: bool = False) -> tuple[list[str], list[str]]:
        """Return the downloader and player argument lists for streaming."""
        if not link:
            raise PlaybackError("Cannot stream a track without a link")
        downloader_cmd = [self.downloader, "-f", "bestaudio", "-o", "-"]
        player_cmd = [self.player, "-nodisp", "-autoexit"]
        if quiet:
            downloader_cmd.append("--quiet")
            player_cmd += ["-loglevel", "quiet"]
        downloader_cmd.append(link)
        player_cmd.append("-")
        return downloader_cmd, player_cmd

    def download_command(self, track: NormalizedTrack, quiet: bool = False) -> list[str]:
        """
        Return the downloader argument list for saving ``track`` to a file.

        Raises:
            PlaybackError: If the track has no link
        """
        if not track.link:
            raise PlaybackError(f"No link to download for '{track.artist} - {track.title}'")
        name = sanitize_filename(f"{track.artist} - {track.title}") or "track"
        template = str(self.output_dir / f"{name}.%(ext)s")
        cmd = [
            self.downloader,
            "-x",
            "--audio-format",
            self.audio_format,
            "-o",
            template,
        ]
        if quiet:
            cmd.append("--quiet")
        cmd.append(track.link)
        return cmd

    def _stream(self, link: str, quiet: bool) -> None:
        downloader_cmd, player_cmd = self.stream_command(link, quiet)
        stderr = subprocess.DEVNULL if quiet else None

        try:
            downloader = subprocess.Popen(
                downloader_cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=stderr,
            )
        except OSError as e:
            raise PlaybackError(f"Failed to start {self.downloader}: {e}") from e

        try:
            player = subprocess.Popen(
                player_cmd,
                stdin=downloader.stdout,
                stderr=stderr,
            )
        except OSError as e:
            downloader.kill()
            downloader.wait()
            raise PlaybackError(f"Failed to start {self.player}: {e}") from e
        finally:
            # Only the player should hold the read end
            if downloader.stdout is not None:
                downloader.stdout.close()

        player.wait()
        downloader.wait()

    def _download(self, track: NormalizedTrack, quiet: bool) -> None:
        cmd = self.download_command(track, quiet)
        stderr = subprocess.DEVNULL if quiet else None

        try:
            process = subprocess.Popen(cmd, stdin=subprocess.DEVNULL, stderr=stderr)
        except OSError as e:
            raise PlaybackError(f"Failed to start {self.downloader}: {e}") from e

        process.wait()
