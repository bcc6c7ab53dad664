import argh

from .main import new, update

# Need a seperate callable for when run via setuptools
def entrypoint():
	argh.dispatch_commands([new, update])

if __name__ == '__main__':
	entrypoint()
