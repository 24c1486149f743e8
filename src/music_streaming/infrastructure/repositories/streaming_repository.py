"""
Streaming Repository Implementation.

This module provides the in-memory repository that backs the streaming API:
ordered lists of every entity plus association maps for the relationships
between them. Lookups by name, title or mobile are linear scans that return
the first match in creation order.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ...domain.associations import AssociationMap
from ...domain.repositories import StreamingRepository
from ...domain.entities import Album, Artist, Playlist, Song, User
from ...domain.result import (
    AlbumNotFoundError,
    PlaylistNotFoundError,
    SongNotFoundError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class InMemoryStreamingRepository(StreamingRepository):
    """In-memory store for users, artists, albums, songs and playlists.

    Not thread-safe. Each instance is isolated, so tests and callers create
    their own rather than sharing a module-level store.
    """

    def __init__(self):
        self.artist_albums: AssociationMap[Album] = AssociationMap("artist_albums")
        self.album_songs: AssociationMap[Song] = AssociationMap("album_songs")
        self.playlist_songs: AssociationMap[Song] = AssociationMap("playlist_songs")
        self.playlist_listeners: AssociationMap[User] = AssociationMap("playlist_listeners")
        self.creator_playlist: Dict[str, Playlist] = {}  # User ID -> latest created Playlist
        self.user_playlists: AssociationMap[Playlist] = AssociationMap("user_playlists")
        self.song_likes: AssociationMap[User] = AssociationMap("song_likes")

        self._users: List[User] = []
        self._songs: List[Song] = []
        self._playlists: List[Playlist] = []
        self._albums: List[Album] = []
        self._artists: List[Artist] = []

    # Entity listings

    @property
    def users(self) -> List[User]:
        return list(self._users)

    @property
    def artists(self) -> List[Artist]:
        return list(self._artists)

    @property
    def albums(self) -> List[Album]:
        return list(self._albums)

    @property
    def songs(self) -> List[Song]:
        return list(self._songs)

    @property
    def playlists(self) -> List[Playlist]:
        return list(self._playlists)

    # Creation

    def create_user(self, name: str, mobile: str) -> User:
        """Create a user. Mobile numbers are not checked for duplicates."""
        user = User(name=name, mobile=mobile)
        self._users.append(user)
        logger.debug(f"Created user {name!r} ({mobile})")
        return user

    def create_artist(self, name: str) -> Artist:
        """Create an artist. Names are not checked for duplicates."""
        artist = Artist(name=name)
        self._artists.append(artist)
        logger.debug(f"Created artist {name!r}")
        return artist

    def create_album(self, title: str, artist_name: str) -> Album:
        """Create an album under the named artist.

        The artist is created first when no artist has that name.
        """
        artist = self.find_artist_by_name(artist_name)
        if artist is None:
            artist = self.create_artist(artist_name)

        album = Album(title=title)
        self._albums.append(album)
        self.artist_albums.link(artist.id, album)

        logger.debug(f"Created album {title!r} for artist {artist_name!r}")
        return album

    def create_song(self, title: str, album_name: str, length: int) -> Song:
        """Create a song on an existing album.

        Raises:
            AlbumNotFoundError: If no album has the title ``album_name``.
        """
        album = self.find_album_by_title(album_name)
        if album is None:
            logger.warning(f"Cannot create song {title!r}: album {album_name!r} does not exist")
            raise AlbumNotFoundError(album_name)

        song = Song(title=title, length=length)
        self._songs.append(song)
        self.album_songs.link(album.id, song)

        logger.debug(f"Created song {title!r} ({length}) on album {album_name!r}")
        return song

    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Playlist:
        """Create a playlist of every existing song with exactly ``length``.

        Songs created later are not added.

        Raises:
            UserNotFoundError: If no user has this mobile number.
        """
        user = self._require_user(mobile)
        songs = [song for song in self._songs if song.length == length]
        return self._register_playlist(user, title, songs)

    def create_playlist_on_name(self, mobile: str, title: str, song_titles: Iterable[str]) -> Playlist:
        """Create a playlist from song titles, in the order given.

        Titles that match no song are skipped.

        Raises:
            UserNotFoundError: If no user has this mobile number.
        """
        user = self._require_user(mobile)

        songs = []
        for song_title in song_titles:
            song = self.find_song_by_title(song_title)
            if song is not None:
                songs.append(song)
            else:
                logger.debug(f"Skipping unknown song {song_title!r} for playlist {title!r}")

        return self._register_playlist(user, title, songs)

    def _register_playlist(self, user: User, title: str, songs: List[Song]) -> Playlist:
        playlist = Playlist(title=title)
        self._playlists.append(playlist)

        self.playlist_songs.put(playlist.id, songs)
        self.playlist_listeners.put(playlist.id, [user])
        # Overwrites any earlier playlist by the same user
        self.creator_playlist[user.id] = playlist

        logger.debug(f"User {user.mobile} created playlist {title!r} with {len(songs)} songs")
        return playlist

    # Queries with side effects

    def find_playlist(self, mobile: str, playlist_title: str) -> Playlist:
        """Look up a playlist on behalf of a user.

        The user becomes a listener unless they already are one or this is
        the playlist they created most recently.

        Raises:
            UserNotFoundError: If no user has this mobile number.
            PlaylistNotFoundError: If no playlist has this title.
        """
        user = self._require_user(mobile)

        playlist = self.find_playlist_by_title(playlist_title)
        if playlist is None:
            logger.warning(f"Playlist {playlist_title!r} does not exist")
            raise PlaylistNotFoundError(playlist_title)

        is_listener = self.playlist_listeners.contains(playlist.id, user)
        is_creator = self.creator_playlist.get(user.id) is playlist
        if not is_listener and not is_creator:
            self.playlist_listeners.link(playlist.id, user)
            logger.info(f"User {mobile} is now listening to playlist {playlist_title!r}")

        return playlist

    def like_song(self, mobile: str, song_title: str) -> Song:
        """Like a song, crediting its artist too.

        Liking the same song twice is a no-op that still returns the song.

        Raises:
            UserNotFoundError: If no user has this mobile number.
            SongNotFoundError: If no song has this title.
        """
        user = self._require_user(mobile)

        song = self.find_song_by_title(song_title)
        if song is None:
            logger.warning(f"Song {song_title!r} does not exist")
            raise SongNotFoundError(song_title)

        if self.song_likes.contains(song.id, user):
            logger.debug(f"User {mobile} already likes {song_title!r}")
            return song

        self.song_likes.link(song.id, user)
        song.add_like()

        artist = self.find_artist_of_song(song)
        if artist is not None:
            artist.add_like()

        logger.info(f"User {mobile} liked {song_title!r} (song likes: {song.likes})")
        return song

    # Popularity

    def most_popular_artist(self) -> Optional[str]:
        """Name of the artist with the most likes; earliest created wins ties."""
        best = self._first_with_most_likes(self._artists)
        return best.name if best else None

    def most_popular_song(self) -> Optional[str]:
        """Title of the song with the most likes; earliest created wins ties."""
        best = self._first_with_most_likes(self._songs)
        return best.title if best else None

    @staticmethod
    def _first_with_most_likes(entities):
        best = None
        for entity in entities:
            # Strictly greater keeps the first of equal counts
            if best is None or entity.likes > best.likes:
                best = entity
        return best

    # Reverse lookup

    def find_artist_of_song(self, song: Song) -> Optional[Artist]:
        """Resolve a song's artist through its album.

        Scans the album -> songs map for the album holding the song, then the
        artist -> albums map for the artist holding that album.
        """
        album_id = self.album_songs.find_key(song)
        if album_id is None:
            return None

        album = next((a for a in self._albums if a.id == album_id), None)
        artist_id = self.artist_albums.find_key(album) if album is not None else None
        if artist_id is None:
            return None

        return next((a for a in self._artists if a.id == artist_id), None)

    def get_artist_name_from_song(self, song: Song) -> Optional[str]:
        """Get the name of the artist owning ``song``, if any."""
        artist = self.find_artist_of_song(song)
        return artist.name if artist else None

    # Lookups

    def find_user_by_mobile(self, mobile: str) -> Optional[User]:
        return next((u for u in self._users if u.mobile == mobile), None)

    def find_artist_by_name(self, name: str) -> Optional[Artist]:
        return next((a for a in self._artists if a.name == name), None)

    def find_album_by_title(self, title: str) -> Optional[Album]:
        return next((a for a in self._albums if a.title == title), None)

    def find_song_by_title(self, title: str) -> Optional[Song]:
        return next((s for s in self._songs if s.title == title), None)

    def find_playlist_by_title(self, title: str) -> Optional[Playlist]:
        return next((p for p in self._playlists if p.title == title), None)

    def _require_user(self, mobile: str) -> User:
        user = self.find_user_by_mobile(mobile)
        if user is None:
            logger.warning(f"User with mobile {mobile} does not exist")
            raise UserNotFoundError(mobile)
        return user

    # Relationship readers

    def get_artist_albums(self, artist: Artist) -> List[Album]:
        return list(self.artist_albums.get(artist.id))

    def get_album_songs(self, album: Album) -> List[Song]:
        return list(self.album_songs.get(album.id))

    def get_playlist_songs(self, playlist: Playlist) -> List[Song]:
        return list(self.playlist_songs.get(playlist.id))

    def get_playlist_listeners(self, playlist: Playlist) -> List[User]:
        return list(self.playlist_listeners.get(playlist.id))

    def get_song_likers(self, song: Song) -> List[User]:
        return list(self.song_likes.get(song.id))

    def get_created_playlist(self, user: User) -> Optional[Playlist]:
        """Get the playlist ``user`` created most recently."""
        return self.creator_playlist.get(user.id)

    def get_user_playlists(self, user: User) -> List[Playlist]:
        """Get the playlists recorded for ``user``.

        Nothing writes to this map, so the list is always empty. Use
        :meth:`get_created_playlist` for the user's own playlist.
        """
        return list(self.user_playlists.get(user.id))

    # Statistics

    def get_statistics(self) -> Dict[str, Any]:
        """Get repository statistics."""
        return {
            "total_users": len(self._users),
            "total_artists": len(self._artists),
            "total_albums": len(self._albums),
            "total_songs": len(self._songs),
            "total_playlists": len(self._playlists),
            "total_song_likes": sum(s.likes for s in self._songs),
            "most_popular_artist": self.most_popular_artist(),
            "most_popular_song": self.most_popular_song(),
        }
