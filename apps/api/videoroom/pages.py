"""HTML documents for the landing and room pages."""
from __future__ import annotations

import html
import json
from string import Template

LANDING_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>LiveKit Video App</title>
  <link rel="stylesheet" href="/css/styles.css" />
</head>
<body>
  <h1>LiveKit Video Call</h1>
  <div class="controls">
    <label for="roomInput">Room Name:</label>
    <input type="text" id="roomInput" placeholder="Enter room name" autofocus />
    <button id="joinBtn">Join Room</button>
  </div>
  <script>
    const roomInput = document.getElementById('roomInput');

    function goToRoom() {
      const room = roomInput.value.trim();
      if (room) {
        window.location.href = '/room/' + encodeURIComponent(room);
      }
    }

    document.getElementById('joinBtn').addEventListener('click', goToRoom);
    roomInput.addEventListener('keydown', (event) => {
      if (event.key === 'Enter') {
        goToRoom();
      }
    });
  </script>
</body>
</html>
"""

# $title is HTML-escaped, $room_literal is a JSON string safe inside <script>.
ROOM_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>Room: $title</title>
  <link rel="stylesheet" href="/css/styles.css" />
</head>
<body>
  <h1>Room: $title</h1>
  <div class="controls">
    <button id="joinBtn">Join Room</button>
    <button id="leaveBtn" disabled>Leave Room</button>
  </div>
  <div id="error" class="error"></div>
  <div class="videos">
    <div>
      <h2>Local Video</h2>
      <div id="localVideoContainer" class="video-container">
        <span class="placeholder">Not connected</span>
      </div>
      <audio id="localAudio" autoplay muted></audio>
    </div>
    <div>
      <h2>Remote Streams</h2>
      <div id="remoteContainer" class="video-container">
        <span class="placeholder">No participants</span>
      </div>
    </div>
  </div>
  <script type="module">
    import {
      Room,
      RoomEvent,
      Track,
      createLocalTracks
    } from 'https://cdn.jsdelivr.net/npm/livekit-client/dist/livekit-client.esm.mjs';

    const roomName = $room_literal;
    const joinBtn = document.getElementById('joinBtn');
    const leaveBtn = document.getElementById('leaveBtn');
    const errorDiv = document.getElementById('error');
    const localVideoContainer = document.getElementById('localVideoContainer');
    const localAudioElement = document.getElementById('localAudio');
    const remoteContainer = document.getElementById('remoteContainer');
    let livekitRoom = null;
    let localTracks = [];

    function apiUrl(path) {
      return path + '?room=' + encodeURIComponent(roomName);
    }

    function showPlaceholder(container, visible) {
      container.querySelector('.placeholder').hidden = !visible;
    }

    function clearMedia(container) {
      container.querySelectorAll('video, audio').forEach((el) => el.remove());
      showPlaceholder(container, true);
    }

    function attachTrack(track, container) {
      const el = track.attach();
      if (track.kind === Track.Kind.Video) {
        el.style.width = '200px';
        el.style.height = 'auto';
        el.style.margin = '5px';
        showPlaceholder(container, false);
      } else {
        el.style.display = 'none';
      }
      container.appendChild(el);
    }

    function detachTrack(track, container) {
      track.detach().forEach((el) => el.remove());
      if (!container.querySelector('video')) {
        showPlaceholder(container, true);
      }
    }

    // Stops local capture and resets the page; returns the room still to disconnect.
    function teardown() {
      const room = livekitRoom;
      livekitRoom = null;
      localTracks.forEach((track) => track.stop());
      localTracks = [];
      clearMedia(localVideoContainer);
      localAudioElement.srcObject = null;
      clearMedia(remoteContainer);
      leaveBtn.disabled = true;
      joinBtn.disabled = false;
      return room;
    }

    async function leaveRoom() {
      const room = teardown();
      if (room) {
        await room.disconnect();
      }
    }

    async function joinRoom() {
      joinBtn.disabled = true;
      errorDiv.textContent = '';

      try {
        await fetch(apiUrl('/api/create-room'));
        const resp = await fetch(apiUrl('/api/token'));
        if (!resp.ok) throw new Error('Failed to fetch token');
        const { token, wsUrl } = await resp.json();

        const room = new Room({
          audioCaptureDefaults: { echoCancellation: true },
          videoCaptureDefaults: { resolution: { width: 640, height: 480 } }
        });
        livekitRoom = room;

        room
          .on(RoomEvent.TrackSubscribed, (track) => attachTrack(track, remoteContainer))
          .on(RoomEvent.TrackUnsubscribed, (track) => detachTrack(track, remoteContainer))
          .on(RoomEvent.Disconnected, () => {
            if (livekitRoom === room) {
              teardown();
            }
          });

        await room.connect(wsUrl, token);

        room.remoteParticipants.forEach((participant) => {
          participant.trackPublications.forEach((pub) => {
            if (pub.isSubscribed && pub.track) {
              attachTrack(pub.track, remoteContainer);
            }
          });
        });

        localTracks = await createLocalTracks({
          audio: { echoCancellation: true },
          video: { resolution: { width: 640, height: 480 } }
        });

        for (const track of localTracks) {
          await room.localParticipant.publishTrack(track);
          if (track.kind === Track.Kind.Video) {
            attachTrack(track, localVideoContainer);
          } else {
            localAudioElement.srcObject = new MediaStream([track.mediaStreamTrack]);
            localAudioElement.play().catch((e) => {
              console.warn('Audio autoplay prevented:', e);
            });
          }
        }

        leaveBtn.disabled = false;
      } catch (e) {
        console.error('Error joining room:', e);
        await leaveRoom();
        errorDiv.textContent = 'Cannot connect to LiveKit: ' + e.message;
      }
    }

    leaveBtn.addEventListener('click', leaveRoom);

    joinBtn.addEventListener('click', joinRoom);
  </script>
</body>
</html>
""")

_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def script_string(value: str) -> str:
    """Encode ``value`` as a JavaScript string literal that cannot close its <script>."""

    literal = json.dumps(value)
    for char, escaped in _SCRIPT_UNSAFE.items():
        literal = literal.replace(char, escaped)
    return literal


def render_room_page(room: str) -> str:
    return ROOM_PAGE.substitute(title=html.escape(room), room_literal=script_string(room))
