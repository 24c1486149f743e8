"""Tests for association maps."""

from music_streaming.domain.associations import AssociationMap
from music_streaming.domain.entities import Song, User


class TestAssociationMap:
    """Test the AssociationMap table."""

    def test_get_missing_key(self):
        """Test that a missing key reads as an empty list."""
        links = AssociationMap("album_songs")

        assert links.get("nope") == []
        assert "nope" not in links
        assert len(links) == 0

    def test_link_appends_in_order(self):
        """Test that links keep insertion order."""
        links = AssociationMap("album_songs")
        first = Song(title="One", length=1)
        second = Song(title="Two", length=2)

        links.link("album", first)
        links.link("album", second)

        assert links.get("album") == [first, second]
        assert "album" in links
        assert links.keys() == ["album"]

    def test_put_replaces(self):
        """Test that put replaces the stored list."""
        links = AssociationMap("playlist_songs")
        song = Song(title="One", length=1)
        links.link("playlist", Song(title="Old", length=1))

        links.put("playlist", [song])

        assert links.get("playlist") == [song]

    def test_contains_uses_identity(self):
        """Test that lookalike entities are not confused."""
        links = AssociationMap("song_likes")
        alice = User(name="Alice", mobile="111")
        twin = User(name="Alice", mobile="111")

        links.link("song", alice)

        assert links.contains("song", alice)
        assert not links.contains("song", twin)
        assert not links.contains("other", alice)

    def test_find_key_returns_first_owner(self):
        """Test reverse lookup scans keys in insertion order."""
        links = AssociationMap("album_songs")
        shared = Song(title="Shared", length=1)
        links.link("first", Song(title="Other", length=1))
        links.link("second", shared)
        links.link("third", shared)

        assert links.find_key(shared) == "second"
        assert links.find_key(Song(title="Shared", length=1)) is None

    def test_iteration_and_repr(self):
        links = AssociationMap("artist_albums")
        links.link("a", "x")
        links.link("b", "y")

        assert list(links) == ["a", "b"]
        assert repr(links) == "AssociationMap('artist_albums', keys=2)"
