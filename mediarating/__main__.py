# mediarating/__main__.py

import uvicorn


def main():
    uvicorn.run("mediarating.main:app", host="0.0.0.0", port=8080)


if __name__ == "__main__":
    main()
