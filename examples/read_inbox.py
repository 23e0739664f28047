"""
Inbox listing example.

Demonstrates reading all messages and grouping multi-part messages.
"""

from collections import defaultdict
from gammusms import GammuPhone, GammuConfig

# Replace with your gammurc section
SECTION = "1"


def main():
    """Main function."""
    print("gammusms - Inbox\n")

    phone = GammuPhone(GammuConfig(section=SECTION))
    messages = phone.sms.get_messages()

    if messages == {"inbox": "empty"}:
        print("Inbox is empty")
        return

    # Join concatenated parts by their link id
    parts = defaultdict(dict)

    for index, message in messages["inbox"].items():
        sender = message.fields.get("remote_number", "?")
        sent = message.fields.get("sent", "?")

        if message.link is not None:
            parts[(sender, message.link.id)][int(message.link.part)] = message.body
            continue

        print(f"[{index}] {sent} {sender}: {message.body}")

    for (sender, link_id), bodies in parts.items():
        text = "".join(bodies[n] for n in sorted(bodies))
        print(f"[multi-part {link_id}] {sender}: {text}")


if __name__ == "__main__":
    main()
