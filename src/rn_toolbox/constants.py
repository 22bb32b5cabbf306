from rn_toolbox.models import IconSizeAndroid, IconSizeIOS, SplashscreenSize

# Android

ICON_SIZES_ANDROID = (
    IconSizeAndroid(density="mdpi", size=48),
    IconSizeAndroid(density="hdpi", size=72),
    IconSizeAndroid(density="xhdpi", size=96),
    IconSizeAndroid(density="xxhdpi", size=144),
    IconSizeAndroid(density="xxxhdpi", size=192),
)

ANDROID_WEB_ICON_SIZE = 512

SPLASHSCREEN_SIZES_ANDROID = (
    SplashscreenSize(density="ldpi", width=200, height=320),
    SplashscreenSize(density="mdpi", width=320, height=480),
    SplashscreenSize(density="hdpi", width=480, height=800),
    SplashscreenSize(density="xhdpi", width=720, height=1280),
    SplashscreenSize(density="xxhdpi", width=960, height=1600),
    SplashscreenSize(density="xxxhdpi", width=1280, height=1920),
)

# iOS

ICON_SIZES_IOS = (
    IconSizeIOS(base_size=20, name="Icon-Notification", scales=(2, 3)),
    IconSizeIOS(base_size=29, name="Icon-Small", scales=(2, 3)),
    IconSizeIOS(base_size=40, name="Icon-Spotlight-40", scales=(2, 3)),
    IconSizeIOS(base_size=60, name="Icon-60", scales=(2, 3)),
    IconSizeIOS(base_size=1024, name="iTunesArtwork", scales=(1,), idiom="ios-marketing"),
)

SPLASHSCREEN_SIZES_IOS = (
    SplashscreenSize(width=320, height=480),
    SplashscreenSize(density="2x", width=750, height=1334),
    SplashscreenSize(density="3x", width=1242, height=2208),
)

# Output locations, relative to the project root

ANDROID_MAIN_DIR = "android/app/src/main"
IOS_ASSETS_DIR = "ios/{app_name}/Images.xcassets"
MANIFEST_FILENAME = "Contents.json"
