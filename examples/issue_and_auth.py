import streamauth
from streamauth.sdk import authenticate_publish


def main() -> None:
    server = streamauth.run(port=0)
    client = server.client()

    entry = client.new_stream()
    print(f"Publish to rtmp://localhost:1935/stream/{entry.stream_key}")

    manifest_id = authenticate_publish(client, f"/stream/{entry.stream_key}")
    print(f"Playback at http://localhost:7935/stream/{manifest_id}.m3u8")

    try:
        client.authenticate("not-a-real-key")
    except streamauth.UnauthorizedError:
        print("Unknown stream key rejected")


if __name__ == "__main__":
    main()
