import urlcodec
from urlcodec.config.system_settings import Settings

settings = Settings()
app = urlcodec.create_app(settings)

if __name__ == '__main__':
    print('-'*50)
    print('URL Codec Service')
    print(f'http://{settings.HOST}:{settings.PORT}{settings.API_PREFIX}/codec/encodings')
    print('-'*50)
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG, use_reloader=settings.DEBUG)
