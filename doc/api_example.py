import io

import httpversion

status_lines = [
    b'HTTP/1.1 200 OK',
    b'HTTP/1.0 404 Not Found',
    b'http/1.1 200 OK',
    b'HTTP/2 200',
]

bad_lines = []

for line in status_lines:
    version_field = line.split(b' ', 1)[0]
    version = httpversion.parse_version(version_field, strict=False)
    if not httpversion.okay(version):
        bad_lines.append(line)

out = io.BytesIO()
httpversion.write_version(httpversion.http11, out)
out.write(b' 505 HTTP Version Not Supported\r\n')

if bad_lines:
    print('%d status lines had a malformed version' % len(bad_lines))
print(out.getvalue().decode('ascii').strip())
