from bitparsec import run_parser, sequence_of, tag, uint

# Field layout of an IPv4 header without options.
# https://en.wikipedia.org/wiki/IPv4#Header
ip_header = sequence_of([
    uint(4).map(tag("Version")),
    uint(4).map(tag("IHL")),
    uint(6).map(tag("DSCP")),
    uint(2).map(tag("ECN")),
    uint(16).map(tag("Total Length")),
    uint(16).map(tag("Identification")),
    uint(3).map(tag("Flags")),
    uint(13).map(tag("Fragment Offset")),
    uint(8).map(tag("TTL")),
    uint(8).map(tag("Protocol")),
    uint(16).map(tag("Header Checksum")),
    uint(32).map(tag("Source IP")),
    uint(32).map(tag("Destination IP")),
])


def dotted_quad(address: int) -> str:
    return ".".join(str((address >> shift) & 0xFF) for shift in (24, 16, 8, 0))


if __name__ == "__main__":
    packet = bytes.fromhex("450000730000400040110000c0a80001c0a800c7")
    state = run_parser(ip_header, packet)
    if state.failed:
        print(state.error)
    else:
        for field in state.result:
            shown = dotted_quad(field.value) if field.name.endswith(" IP") else field.value
            print(f"{field.name:<16} {shown}")
