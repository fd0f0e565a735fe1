"""
Role policy: which LiveKit video capabilities a participant gets.
Pure functions; no request or framework types here.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class VideoGrant:
    room: str
    can_publish: bool
    can_subscribe: bool
    room_admin: bool
    room_create: bool
    room_join: bool = True
    can_publish_data: bool = True

    def to_claim(self) -> dict:
        """The `video` claim as LiveKit expects it (camelCase keys)."""
        return {
            "roomJoin": self.room_join,
            "room": self.room,
            "canPublish": self.can_publish,
            "canPublishData": self.can_publish_data,
            "canSubscribe": self.can_subscribe,
            "roomAdmin": self.room_admin,
            "roomCreate": self.room_create,
        }


def derive_grant(
    room_name: str,
    *,
    is_host: bool = False,
    can_publish: bool = False,
    can_subscribe: bool = True,
) -> VideoGrant:
    """
    Host always gets publish + admin + create. Admin/create never follow from can_publish alone.
    Data channel (reactions etc.) is open to everyone.
    """
    return VideoGrant(
        room=room_name,
        can_publish=is_host or can_publish,
        can_subscribe=can_subscribe,
        room_admin=is_host,
        room_create=is_host,
        room_join=True,
        can_publish_data=True,
    )
