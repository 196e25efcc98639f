# cn_topics.py
# Computer Networks topics

NETWORK_MODELS = {
    'id': 'network-models',
    'title': 'OSI and TCP/IP Models',
    'subtitle': 'Layered Views of Network Communication',
    'summary': 'The OSI model splits networking into seven layers; the TCP/IP model condenses them into four that match the protocols actually deployed on the internet.',
    'key_points': [
        'OSI: Physical, Data Link, Network, Transport, Session, Presentation, Application',
        'TCP/IP: Link, Internet, Transport, Application',
        'Each layer serves the one above and uses the one below',
    ],
}

DNS = {
    'id': 'dns-working',
    'title': 'DNS and Its Working',
    'subtitle': "Domain Name System - Internet's Phone Book",
    'summary': 'DNS translates human-readable domain names into IP addresses through a hierarchical distributed database system.',
    'analogy': 'Like a phone book that translates names to phone numbers, DNS translates domain names to IP addresses so computers can find each other.',
    'visual_concept': 'A tree starting from root servers, branching to TLD servers (.com, .org), then to authoritative servers, with caching at every level.',
    'real_world_use': 'Every internet activity: web browsing, email, streaming, mobile apps and IoT devices.',
    'explanation': """DNS is a hierarchical distributed database.

Resolution Steps:
- The stub resolver asks a recursive resolver
- The recursive resolver queries root, TLD and authoritative servers iteratively
- Answers are cached for their TTL

DNS uses UDP port 53 for queries and TCP port 53 for zone transfers and large responses.""",
    'key_points': [
        'Hierarchical structure: Root, TLD, Authoritative servers',
        'Recursive and iterative query resolution',
        'TTL controls cache duration',
        'DNSSEC protects against spoofing',
    ],
    'resources': [
        {'title': 'RFC 1034: Domain Concepts and Facilities', 'url': 'https://www.rfc-editor.org/rfc/rfc1034', 'description': 'The original DNS concepts specification'},
    ],
    'questions': [
        {'question': 'Explain the DNS resolution process.', 'answer': 'The client asks a recursive resolver, which walks root, TLD and authoritative servers (or answers from cache) and returns the final record to the client.'},
    ],
}

HTTP_VS_HTTPS = {
    'id': 'http-vs-https',
    'title': 'HTTP vs HTTPS',
    'subtitle': 'Plaintext and TLS-Protected Web Traffic',
    'summary': 'HTTPS is HTTP carried over TLS, adding encryption, integrity and server authentication.',
    'key_points': [
        'HTTP uses port 80, HTTPS uses port 443',
        'TLS handshake negotiates keys and verifies certificates',
        'HSTS forces browsers to use HTTPS',
    ],
}

TCP_VS_UDP = {
    'id': 'tcp-vs-udp',
    'title': 'TCP vs UDP',
    'subtitle': 'Reliable Streams and Lightweight Datagrams',
    'summary': 'TCP provides connection-oriented, reliable, ordered delivery; UDP provides connectionless, best-effort datagrams with minimal overhead.',
    'key_points': [
        'TCP: handshake, acknowledgements, retransmission, flow and congestion control',
        'UDP: no connection, no ordering, no retransmission',
        'DNS queries and real-time media commonly use UDP',
    ],
}

DHCP = {
    'id': 'dhcp',
    'title': 'DHCP (Dynamic Host Configuration Protocol)',
    'subtitle': 'Automatic IP Address Assignment',
    'summary': 'Protocol for automatically assigning IP addresses and network configuration to devices, including the DORA exchange and lease management.',
    'analogy': 'A hotel reception desk assigning room numbers to arriving guests and tracking check-out times.',
    'explanation': """DHCP Process (DORA):
- Discover: client broadcasts a discover message
- Offer: server offers an available address
- Request: client requests the offered address
- Acknowledge: server confirms the lease

Lease Management:
Clients renew at half the lease time (T1) and rebind at seven eighths (T2) before the lease expires.""",
    'key_points': [
        'DORA: Discover, Offer, Request, Acknowledge',
        'Lease time controls how long an address is kept',
        'Reservations bind fixed addresses to MAC addresses',
        'Relay agents forward DHCP across subnets',
    ],
    'questions': [
        {'question': 'Why does DHCP Discover use broadcast?', 'answer': 'The client has no IP address and does not know the server address yet, so it broadcasts from 0.0.0.0 to 255.255.255.255.'},
    ],
}

APPLICATION_LAYER = [HTTP_VS_HTTPS, DNS]
TRANSPORT_LAYER = [TCP_VS_UDP]
IMPORTANT_CONCEPTS = [DHCP]
