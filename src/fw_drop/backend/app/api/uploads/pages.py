from html import escape

from fw_drop.backend.app.api.uploads.forms import UPLOAD_FIELD_NAME

_STYLE = """
    body { font-family: sans-serif; padding: 20px; background-color: #f4f4f9; }
    .container { max-width: 600px; margin: 0 auto; background: white; padding: 30px;
                 border-radius: 8px; box-shadow: 0 4px 8px rgba(0,0,0,0.1); }
    h1 { color: #333; }
    h1.ok { color: #4CAF50; }
    input[type="file"] { padding: 10px; border: 1px solid #ddd; border-radius: 4px; display: block;
                         margin-bottom: 20px; width: 100%; box-sizing: border-box; }
    button { background-color: #4CAF50; color: white; padding: 10px 15px; border: none;
             border-radius: 4px; cursor: pointer; font-size: 16px; }
    button:hover { background-color: #45a049; }
    .link-box { margin-top: 20px; padding: 15px; background-color: #e6f7ff;
                border: 1px solid #b3e0ff; border-radius: 4px; word-wrap: break-word; }
    a { color: #007bff; text-decoration: none; }
    a:hover { text-decoration: underline; }
"""


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="container">
{body}
    </div>
</body>
</html>
"""


def render_upload_form(publish_base: str) -> str:
    """publish_base is the absolute URL of the publish prefix, without trailing slash."""
    body = f"""
        <h1>Upload Binary File (.bin)</h1>
        <form action="/upload" method="post" enctype="multipart/form-data">
            <input type="file" name="{UPLOAD_FIELD_NAME}" accept=".bin" required>
            <button type="submit">Upload File</button>
        </form>
        <p>Uploaded files will be available for devices here (replace [filename.bin] with your file name):</p>
        <div class="link-box">
            <strong>{escape(publish_base)}/[filename.bin]</strong>
        </div>"""
    return _page("BIN File Uploader", body)


def render_upload_success(filename: str, link: str, size_bytes: int, content_type: str) -> str:
    body = f"""
        <h1 class="ok">Upload Successful!</h1>
        <p>The file <strong>{escape(filename)}</strong> ({size_bytes} bytes, {escape(content_type)}) is now available.</p>
        <p>The device link to download this file is:</p>
        <div class="link-box">
            <a href="{escape(link)}" target="_blank">{escape(link)}</a>
        </div>
        <p style="margin-top: 20px;"><a href="/">&larr; Upload another file</a></p>"""
    return _page("Upload Successful", body)
