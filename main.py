"""Development entrypoint.

Exposes `app` without shadowing the `lottery_api/` package.
"""

import os

from lottery_api import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "3000")), debug=False)
